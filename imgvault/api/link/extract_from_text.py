"""Link extraction from document text."""

from .LinkKind import LinkKind
from .LinkOccurrence import LinkOccurrence
from .match_links import match_links


def _inside(occurrence: LinkOccurrence, containers: list[LinkOccurrence]) -> bool:
    span = occurrence.span
    if span is None:
        return False
    return any(
        container.span is not None and container.span.start <= span.start and span.end <= container.span.end
        for container in containers
    )


def extract_from_text(text: str) -> list[LinkOccurrence]:
    """Extract image link occurrences from ``text``.

    Link-wrapped composites take precedence over the markdown image they
    contain. Results are ordered by position and deduplicated by
    ``raw_target``: the first occurrence of a target is kept.
    """
    wrapped = match_links(text, LinkKind.LINK_WRAPPED)
    simple = [occ for occ in match_links(text, LinkKind.MARKDOWN_IMAGE) if not _inside(occ, wrapped)]
    embeds = match_links(text, LinkKind.BRACKET_EMBED)

    ordered = sorted(wrapped + simple + embeds, key=lambda occ: occ.span.start if occ.span else 0)

    seen: set[str] = set()
    occurrences: list[LinkOccurrence] = []
    for occurrence in ordered:
        if occurrence.raw_target in seen:
            continue
        seen.add(occurrence.raw_target)
        occurrences.append(occurrence)
    return occurrences
