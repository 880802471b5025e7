"""Merge stored episodes with freshly fetched ones.

The merge relies on an insertion-ordered, title-keyed map:

- stored episodes seed the map in their stored order;
- fetched episodes are applied in reverse, so when a title occurs more than
  once in a batch the occurrence nearest to broadcast (earliest in server
  order) is written last and wins;
- a fetched episode inherits ``recorded`` from the entry it replaces;
- replacing an entry keeps that title's original position, new titles are
  appended.
"""

import logging
from collections.abc import Iterable, Iterator

from recwatch.guide.models import Episode

logger = logging.getLogger(__name__)


class TitleIndex:
    """Insertion-ordered mapping of title to episode.

    Iteration order is the order in which titles were first inserted;
    overwriting a title does not move it.
    """

    def __init__(self) -> None:
        self._entries: dict[str, Episode] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, title: object) -> bool:
        return title in self._entries

    def __iter__(self) -> Iterator[Episode]:
        return iter(self._entries.values())

    def get(self, title: str) -> Episode | None:
        return self._entries.get(title)

    def put(self, episode: Episode) -> None:
        self._entries[episode.title] = episode

    def values(self) -> list[Episode]:
        return list(self._entries.values())


def merge_episodes(existing: Iterable[Episode], fetched: Iterable[Episode]) -> list[Episode]:
    """Reconcile the stored episode list with a new fetch.

    Episodes with an empty title are dropped from both inputs.

    Args:
        existing: Episodes loaded from the episode table
        fetched: Episodes in server order (nearest broadcast first)

    Returns:
        Episodes unique by title, in index insertion order

    Example:
        >>> merged = merge_episodes([stored_a], [fresh_a, fresh_b])
        >>> [(e.title, e.recorded) for e in merged]
        [('A', True), ('B', False)]
    """
    index = TitleIndex()

    for episode in existing:
        if episode.title:
            index.put(episode)

    seeded = len(index)
    carried = 0

    for episode in reversed(list(fetched)):
        if not episode.title:
            logger.debug(f"Skipping fetched episode without title: {episode.url}")
            continue

        previous = index.get(episode.title)
        if previous is not None:
            episode = episode.model_copy(update={"recorded": previous.recorded})
            carried += 1

        index.put(episode)

    logger.debug(
        f"Merged {seeded} stored and {carried} matching fetched episodes into {len(index)}"
    )
    return index.values()
