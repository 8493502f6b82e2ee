"""
Duplication of prototype entities.

The service holds no state and never talks to the store: it hands back
a transient copy that the caller decides whether to persist.
"""

from article_api.app.models.article import Prototype


class DuplicationService:
    """Produce unsaved copies of existing entities."""

    @staticmethod
    def duplicate(source: Prototype) -> Prototype:
        """Return a new, unsaved copy of ``source``.

        ``source`` is left untouched and its identity is ignored.  The
        caller is responsible for reporting a missing source before
        calling this.
        """
        return source.duplicate()
