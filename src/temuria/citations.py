"""Grounding citation handling."""

from collections.abc import Iterable

from temuria.data import Source


def dedupe_sources(candidates: Iterable[tuple[str | None, str | None]]) -> list[Source]:
    """Turn raw ``(title, uri)`` citation candidates into unique sources.

    Entries missing a title or uri are dropped. The first occurrence of each
    uri wins, keeping its title and position.
    """
    seen_uris: set[str] = set()
    sources: list[Source] = []
    for title, uri in candidates:
        if not title or not uri:
            continue
        if uri in seen_uris:
            continue
        seen_uris.add(uri)
        sources.append(Source(title=title, uri=uri))
    return sources
