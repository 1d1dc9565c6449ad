# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Multi-attribute sort parameters: parsing, column resolution, and toggling.

A :class:`SortSpec` declares which attributes may be sorted and how each
one maps to physical sort columns. The request carries only attribute
names, e.g. ``?sort=age,-name``::

    sort = SortSpec(
        [
            "age",
            ("name", {
                "asc": {"first_name": "asc", "last_name": "asc"},
                "desc": {"first_name": "desc", "last_name": "desc"},
                "default": "desc",
                "label": "Name",
            }),
        ],
        params={"sort": "age,-name"},
        multi_sort=True,
    )

    sort.current_order()      # (Order("age", ASC), Order("name", DESC))
    sort.resolve_columns()    # {"age": ASC, "first_name": DESC, "last_name": DESC}
    sort.toggle_param("age")  # "-age,-name"
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from flypager.config.properties import SortProperties
from flypager.core.config import Config
from flypager.kernel.exceptions import InvalidArgumentError, UnknownAttributeError
from flypager.web.ports.url import UrlBuilderPort

logger = logging.getLogger(__name__)

_WORD_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|[_\-.\s]+")
_DEFINITION_KEYS = frozenset({"asc", "desc", "default", "label"})
_FROM_PARAMS: Any = object()


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: SortDirection | str) -> SortDirection:
        """Coerce an enum member or a case-insensitive ``"asc"``/``"desc"`` string."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value.strip().lower() in ("asc", "desc"):
            return cls(value.strip().lower())
        raise InvalidArgumentError(f"Invalid sort direction: {value!r}", context={"direction": value})

    def flipped(self) -> SortDirection:
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


@dataclass(frozen=True)
class Order:
    """A single requested sort: attribute name + direction."""

    attribute: str
    direction: SortDirection = SortDirection.ASC

    @staticmethod
    def asc(attribute: str) -> Order:
        return Order(attribute=attribute, direction=SortDirection.ASC)

    @staticmethod
    def desc(attribute: str) -> Order:
        return Order(attribute=attribute, direction=SortDirection.DESC)

    def flipped(self) -> Order:
        return Order(attribute=self.attribute, direction=self.direction.flipped())

    def to_token(self) -> str:
        """Render as a sort parameter token: ``-name`` when descending."""
        if self.direction is SortDirection.DESC:
            return f"-{self.attribute}"
        return self.attribute


ColumnMapping = tuple[tuple[str, SortDirection], ...]


def _normalize_columns(columns: Mapping[str, Any] | Iterable[tuple[str, Any]]) -> ColumnMapping:
    items = columns.items() if isinstance(columns, Mapping) else columns
    return tuple((str(column), SortDirection.parse(direction)) for column, direction in items)


def humanize(name: str) -> str:
    """Turn ``first_name`` or ``firstName`` into ``First Name``."""
    words = [word for word in _WORD_BOUNDARY_RE.split(name) if word]
    return " ".join(word[:1].upper() + word[1:] for word in words)


@dataclass(frozen=True)
class AttributeDefinition:
    """A sortable attribute and the physical columns it sorts by.

    ``asc`` and ``desc`` accept either a mapping ``{column: direction}`` or
    a sequence of ``(column, direction)`` pairs; both are normalised into
    tuples. Both must be non-empty.
    """

    name: str
    asc: ColumnMapping
    desc: ColumnMapping
    default: SortDirection | None = None
    label: str | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise InvalidArgumentError("Sort attribute name must not be empty")
        object.__setattr__(self, "asc", _normalize_columns(self.asc))
        object.__setattr__(self, "desc", _normalize_columns(self.desc))
        if self.default is not None:
            object.__setattr__(self, "default", SortDirection.parse(self.default))
        if not self.asc or not self.desc:
            raise InvalidArgumentError(
                f"Sort attribute {self.name!r} must define both 'asc' and 'desc' columns",
                context={"attribute": self.name},
            )

    @classmethod
    def simple(cls, name: str, label: str | None = None) -> AttributeDefinition:
        """Attribute sorted by the column of the same name."""
        return cls(
            name=name,
            asc=((name, SortDirection.ASC),),
            desc=((name, SortDirection.DESC),),
            label=label,
        )

    @classmethod
    def from_mapping(cls, name: str, mapping: Mapping[str, Any]) -> AttributeDefinition:
        """Build from ``{"asc": ..., "desc": ..., "default": ..., "label": ...}``.

        When only one of ``asc`` and ``desc`` is given, the other sorts by
        the column named after the attribute. At least one must be given,
        and a given mapping must not be empty.
        """
        unknown = set(mapping) - _DEFINITION_KEYS
        if unknown:
            raise InvalidArgumentError(
                f"Unsupported keys in definition of sort attribute {name!r}: {sorted(unknown)}",
                context={"attribute": name},
            )
        asc = mapping.get("asc")
        desc = mapping.get("desc")
        if asc is None and desc is None:
            raise InvalidArgumentError(
                f"Sort attribute {name!r} must define 'asc' or 'desc' columns",
                context={"attribute": name},
            )
        return cls(
            name=name,
            asc=asc if asc is not None else ((name, SortDirection.ASC),),
            desc=desc if desc is not None else ((name, SortDirection.DESC),),
            default=mapping.get("default"),
            label=mapping.get("label"),
        )

    @property
    def display_label(self) -> str:
        return self.label if self.label is not None else humanize(self.name)

    def columns(self, direction: SortDirection) -> ColumnMapping:
        return self.desc if direction is SortDirection.DESC else self.asc


AttributeConfig = str | AttributeDefinition | tuple[str, "Mapping[str, Any] | AttributeDefinition | None"]


def _to_definition(entry: Any) -> AttributeDefinition:
    if isinstance(entry, AttributeDefinition):
        return entry
    if isinstance(entry, str):
        return AttributeDefinition.simple(entry)
    if isinstance(entry, tuple) and len(entry) == 2:
        name, value = entry
        if value is None:
            return AttributeDefinition.simple(name)
        if isinstance(value, AttributeDefinition):
            return value
        if isinstance(value, Mapping):
            return AttributeDefinition.from_mapping(name, value)
    raise InvalidArgumentError(f"Unsupported sort attribute declaration: {entry!r}")


def _to_order(entry: Order | tuple[str, SortDirection | str]) -> Order:
    if isinstance(entry, Order):
        return entry
    attribute, direction = entry
    return Order(attribute=attribute, direction=SortDirection.parse(direction))


class SortSpec:
    """Whitelist of sortable attributes bound to the current request parameters.

    Args:
        attributes: Attribute declarations, see :meth:`configure`.
        params: Request parameters; ``params[param]`` is the raw sort string.
        param: Name of the sort parameter.
        separator: Separator between tokens of the sort string.
        multi_sort: Whether more than one attribute may be sorted at once.
        default_order: Order used when the request specifies none.
    """

    def __init__(
        self,
        attributes: Iterable[AttributeConfig] | Mapping[str, Any] = (),
        *,
        params: Mapping[str, Any] | None = None,
        param: str = "sort",
        separator: str = ",",
        multi_sort: bool = False,
        default_order: Mapping[str, SortDirection | str] | None = None,
    ) -> None:
        if not separator:
            raise InvalidArgumentError("Sort separator must not be empty")
        self.params: Mapping[str, Any] = params if params is not None else {}
        self.param = param
        self.separator = separator
        self.multi_sort = multi_sort
        self._default_order_config: Mapping[str, SortDirection | str] = default_order or {}
        self._default_order: tuple[Order, ...] = ()
        self._attributes: dict[str, AttributeDefinition] = {}
        self._cache_key: tuple[str | None, bool] | None = None
        self._cached_order: tuple[Order, ...] | None = None
        self.configure(attributes)

    @classmethod
    def from_config(
        cls,
        config: Config,
        attributes: Iterable[AttributeConfig] | Mapping[str, Any],
        *,
        params: Mapping[str, Any] | None = None,
        default_order: Mapping[str, SortDirection | str] | None = None,
    ) -> SortSpec:
        """Create a SortSpec using the ``flypager.sort`` configuration section."""
        props = config.bind(SortProperties)
        return cls(
            attributes,
            params=params,
            param=props.param,
            separator=props.separator,
            multi_sort=props.multi_sort,
            default_order=default_order,
        )

    def configure(self, attributes: Iterable[AttributeConfig] | Mapping[str, Any]) -> None:
        """Replace the attribute whitelist.

        Entries may be attribute names, :class:`AttributeDefinition`
        instances, or ``(name, definition)`` pairs where the definition is a
        mapping or ``None``. A mapping of ``name -> definition`` is accepted
        as well.
        """
        entries = attributes.items() if isinstance(attributes, Mapping) else attributes
        definitions: dict[str, AttributeDefinition] = {}
        for entry in entries:
            definition = _to_definition(entry)
            definitions[definition.name] = definition
        self._attributes = definitions

        default_order = []
        for attribute, direction in self._default_order_config.items():
            if attribute not in definitions:
                raise UnknownAttributeError(attribute, f"Default order references unknown attribute: {attribute!r}")
            default_order.append(Order(attribute=attribute, direction=SortDirection.parse(direction)))
        self._default_order = tuple(default_order)
        self.invalidate()

    @property
    def attributes(self) -> Mapping[str, AttributeDefinition]:
        return dict(self._attributes)

    @property
    def default_order(self) -> tuple[Order, ...]:
        return self._default_order

    def invalidate(self) -> None:
        """Drop cached parse results."""
        self._cache_key = None
        self._cached_order = None

    def is_sortable(self, name: str) -> bool:
        return name in self._attributes

    def definition(self, name: str) -> AttributeDefinition:
        try:
            return self._attributes[name]
        except KeyError:
            raise UnknownAttributeError(name) from None

    def label_for(self, name: str) -> str:
        return self.definition(name).display_label

    def current_order(self, raw_param: str | None = _FROM_PARAMS, multi_sort: bool | None = None) -> tuple[Order, ...]:
        """Return the requested sort order.

        *raw_param* defaults to ``params[param]`` and *multi_sort* to the
        configured value. Unknown tokens are skipped, repeated attributes
        keep their first occurrence, and an empty result falls back to the
        default order. The last result is reused while the input repeats.
        """
        if raw_param is _FROM_PARAMS:
            raw_param = self.params.get(self.param)
        if multi_sort is None:
            multi_sort = self.multi_sort
        raw = raw_param if isinstance(raw_param, str) else None

        key = (raw, multi_sort)
        if self._cached_order is None or self._cache_key != key:
            self._cached_order = self._parse(raw, multi_sort)
            self._cache_key = key
        return self._cached_order

    def _parse(self, raw: str | None, multi_sort: bool) -> tuple[Order, ...]:
        orders: list[Order] = []
        seen: set[str] = set()
        for token in (raw or "").split(self.separator):
            name = token.strip()
            direction = SortDirection.ASC
            if name.startswith("-"):
                direction = SortDirection.DESC
                name = name[1:]

            if name not in self._attributes:
                if name:
                    logger.debug("Ignoring unknown sort attribute %r", name)
                continue
            if name in seen:
                continue

            seen.add(name)
            orders.append(Order(attribute=name, direction=direction))
            if not multi_sort:
                break

        return tuple(orders) if orders else self._default_order

    def direction_of(self, attribute: str) -> SortDirection | None:
        """Current direction of *attribute*, or None when it is not sorted."""
        for order in self.current_order():
            if order.attribute == attribute:
                return order.direction
        return None

    def resolve_columns(
        self, order: Iterable[Order | tuple[str, SortDirection | str]] | None = None
    ) -> dict[str, SortDirection]:
        """Expand attribute orders into physical columns and their directions.

        Attribute order and the column order inside each definition are
        preserved. A column claimed by an earlier attribute keeps its
        earlier direction.
        """
        entries = self.current_order() if order is None else (_to_order(e) for e in order)
        columns: dict[str, SortDirection] = {}
        for entry in entries:
            for column, direction in self.definition(entry.attribute).columns(entry.direction):
                columns.setdefault(column, direction)
        return columns

    def toggle_param(self, attribute: str) -> str:
        """Sort parameter value that toggles *attribute*.

        A sorted attribute flips direction; an unsorted one starts with its
        default direction. With multi-sort the toggled attribute moves to
        the front of the existing order.
        """
        definition = self.definition(attribute)
        remaining = list(self.current_order())
        current = next((o for o in remaining if o.attribute == attribute), None)
        if current is not None:
            toggled = current.flipped()
            remaining.remove(current)
        else:
            toggled = Order(attribute=attribute, direction=definition.default or SortDirection.ASC)

        orders = [toggled, *remaining] if self.multi_sort else [toggled]
        return self.separator.join(order.to_token() for order in orders)

    def create_url(self, attribute: str, url_builder: UrlBuilderPort) -> str:
        """URL that applies :meth:`toggle_param` for *attribute*."""
        return url_builder.build({self.param: self.toggle_param(attribute)})
