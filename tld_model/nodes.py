"""
tld_model/nodes.py — object model of a parsed tag library descriptor.

Hierarchy:
  Taglib → Tag → Attribute → DeferredMethod / DeferredValue
  Taglib → Function

Nodes are filled by tld_parser.parser in one depth-first pass; a parent's
dates are final before any of its children is built. Back-references to
the parent are excluded from repr and comparison.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .dates import Dates


@dataclass(slots=True, eq=False)
class DeferredMethod:
    attribute:        Attribute = field(repr=False)
    method_signature: str | None


@dataclass(slots=True, eq=False)
class DeferredValue:
    attribute: Attribute = field(repr=False)
    type:      str | None


@dataclass(slots=True, eq=False)
class Attribute:
    """
    One <attribute> of a tag.

    - type: the generics-annotated form from a type="…" comment when present,
            the plain <type> text otherwise
    """
    tag:                 Tag = field(repr=False)
    name:                str | None
    descriptions:        list[str] = field(default_factory=list)
    required:            bool = False
    rtexprvalue:         bool = False
    fragment:            bool = False
    type:                str | None = None
    deferred_method:     DeferredMethod | None = None
    deferred_value:      DeferredValue | None = None
    description_summary: str | None = None


@dataclass(slots=True, eq=False)
class Tag:
    taglib:              Taglib = field(repr=False)
    name:                str | None
    dates:               Dates = Dates.UNKNOWN
    allow_robots:        bool | None = None
    descriptions:        list[str] = field(default_factory=list)
    display_names:       list[str] = field(default_factory=list)
    tag_class:           str | None = None
    tei_class:           str | None = None
    body_content:        str | None = None
    attribute:           dict[str, Attribute] = field(default_factory=dict)
    dynamic_attributes:  bool = False
    example:             str | None = None
    description_summary: str | None = None

    @property
    def attributes(self) -> list[Attribute]:
        return list(self.attribute.values())


@dataclass(slots=True, eq=False)
class Function:
    taglib:              Taglib = field(repr=False)
    name:                str | None
    dates:               Dates = Dates.UNKNOWN
    allow_robots:        bool | None = None
    descriptions:        list[str] = field(default_factory=list)
    display_names:       list[str] = field(default_factory=list)
    function_class:      str | None = None
    function_signature:  str | None = None
    example:             str | None = None
    description_summary: str | None = None


@dataclass(slots=True, eq=False)
class Taglib:
    """
    Root of the model.

    - tags_effective_dates:      merge of all tag dates, None without tags
    - functions_effective_dates: merge of all function dates, None without functions
    - taglib_effective_dates:    own dates merged with both of the above
    """
    tld_path:                  str
    dates:                     Dates = Dates.UNKNOWN
    descriptions:              list[str] = field(default_factory=list)
    display_names:             list[str] = field(default_factory=list)
    tlib_version:              str | None = None
    short_name:                str | None = None
    uri:                       str | None = None
    tag:                       dict[str, Tag] = field(default_factory=dict)
    tags_effective_dates:      Dates | None = None
    function:                  dict[str, Function] = field(default_factory=dict)
    functions_effective_dates: Dates | None = None
    taglib_effective_dates:    Dates | None = None

    @property
    def tags(self) -> list[Tag]:
        return list(self.tag.values())

    @property
    def functions(self) -> list[Function]:
        return list(self.function.values())
