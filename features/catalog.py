"""
Feature catalog for the landing page.

The catalog is a constant, ordered tuple of FeatureRecord. Order is display
order (left-to-right, top-to-bottom) and is never sorted or filtered.
Records validate themselves on construction so a partial record is a
configuration error raised at import time, before anything renders.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple, Union

from config import ConfigurationError


class CatalogError(ConfigurationError):
    """Raised when a feature record or the catalog itself is malformed"""

    def __init__(self, field_name: str, message: Optional[str] = None):
        super().__init__(field_name, message or f"Feature record is missing {field_name}")


class SpanStyle(Enum):
    """Inline formatting for a rich-text span"""
    PLAIN = "plain"
    STRONG = "strong"
    EMPHASIS = "em"
    CODE = "code"
    LINK = "link"


@dataclass(frozen=True)
class Span:
    """One inline run of description text"""
    text: str
    style: SpanStyle = SpanStyle.PLAIN
    href: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.text, str) or not self.text:
            raise CatalogError("span.text", "Description spans must carry text")
        if self.style is SpanStyle.LINK and not self.href:
            raise CatalogError("span.href", f"Link span {self.text!r} has no href")
        if self.style is not SpanStyle.LINK and self.href is not None:
            raise CatalogError("span.href", f"Only link spans take an href, got {self.style.value}")


@dataclass(frozen=True)
class PlainText:
    """Description made of a single run of unformatted text"""
    text: str

    def __post_init__(self):
        if not isinstance(self.text, str) or not self.text.strip():
            raise CatalogError("description", "Description text must not be empty")


@dataclass(frozen=True)
class RichText:
    """Description made of inline spans"""
    spans: Tuple[Span, ...]

    def __post_init__(self):
        # Accept any iterable of spans but store an immutable tuple
        object.__setattr__(self, "spans", tuple(self.spans))
        if not self.spans:
            raise CatalogError("description", "Rich description needs at least one span")
        for span in self.spans:
            if not isinstance(span, Span):
                raise CatalogError("description", f"Expected Span, got {type(span).__name__}")


Description = Union[PlainText, RichText]


@dataclass(frozen=True)
class FeatureRecord:
    """
    One entry in the marketing feature list.

    Attributes:
        title: Short heading shown on the card
        illustration: Asset reference relative to the static directory;
            resolving it is the asset resolver's job
        description: PlainText or RichText body (a bare str becomes PlainText)
    """
    title: str
    illustration: str
    description: Description

    def __post_init__(self):
        if not isinstance(self.title, str) or not self.title.strip():
            raise CatalogError("title")
        if not isinstance(self.illustration, str) or not self.illustration.strip():
            raise CatalogError("illustration", f"Feature {self.title!r} has no illustration")
        if isinstance(self.description, str):
            object.__setattr__(self, "description", PlainText(self.description))
        elif not isinstance(self.description, (PlainText, RichText)):
            raise CatalogError(
                "description",
                f"Feature {self.title!r} has no description",
            )


def validate_catalog(
    records: Iterable[FeatureRecord],
    allow_empty: bool = False
) -> Tuple[FeatureRecord, ...]:
    """
    Check a catalog and freeze it into a tuple, keeping order.

    Args:
        records: Feature records in display order
        allow_empty: Accept a catalog with no records (renders an empty row)

    Raises:
        CatalogError: if the catalog holds a non-FeatureRecord, or is empty
            and allow_empty is False
    """
    catalog = tuple(records)
    if not catalog and not allow_empty:
        raise CatalogError("catalog", "Feature catalog is empty")
    for idx, record in enumerate(catalog):
        if not isinstance(record, FeatureRecord):
            raise CatalogError(
                "catalog", f"Catalog entry {idx} is {type(record).__name__}, not FeatureRecord"
            )
    return catalog


# =============================================================================
# LIBRISCV FEATURES
# =============================================================================

FEATURE_CATALOG: Tuple[FeatureRecord, ...] = validate_catalog([
    FeatureRecord(
        title="Lowest possible latency",
        illustration="img/undraw_to_the_stars_re_wq2x.svg",
        description=PlainText(
            "Calling a guest VM function can finish 1-2 orders of magnitude before "
            "other emulators begin executing the first instruction"
        ),
    ),
    FeatureRecord(
        title="Cross-platform support",
        illustration="img/undraw_real_time_collaboration_c62i.svg",
        description=PlainText(
            "Compile once your code and run it. The sandbox will be compiled for "
            "every platform and interpret your code."
        ),
    ),
    FeatureRecord(
        title="Secure Sandbox",
        illustration="img/undraw_safe_re_kiil.svg",
        description=PlainText(
            "Provides a safe sandbox that guests can not escape from, short of "
            "vulnerabilities in custom system calls installed by the host."
        ),
    ),
    FeatureRecord(
        title="Godot Addon",
        illustration="img/undraw_video_games_x1tr.svg",
        description=PlainText("Supports Godot game engine with godot-sandbox addon."),
    ),
    FeatureRecord(
        title="JIT-compiled languages",
        illustration="img/undraw_start_building_re_xani.svg",
        description=PlainText(
            "Supports sandboxing language-runtimes that use JIT-compilation, eg. V8 JavaScript."
        ),
    ),
    FeatureRecord(
        title="Tiny memory footprint",
        illustration="img/undraw_server_re_twwj.svg",
        description=PlainText("Less than 40kB total memory usage for fibonacci program."),
    ),
])
