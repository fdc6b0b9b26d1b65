"""Best-fit dispatch from an incoming document to a pattern class.

A :class:`COARNotifyFactory` keeps an ordered list of pattern classes and
picks the one whose ``TYPE`` best fits a document's ``type``:

1. A class is a candidate only if every one of its ``TYPE`` tokens is in
   the document's types.
2. A candidate whose ``TYPE`` is exactly the document's types wins at once.
3. Otherwise the candidate leaving the fewest unmatched document types
   wins; ties go to whichever was registered first.

:data:`DEFAULT_FACTORY` holds the built-in catalogue and is what
:class:`~coarnotify.server.COARNotifyServer` and nested-pattern lookups use
unless they are handed a factory of their own.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

from coarnotify.core.activitystreams2 import ActivityStream, Properties
from coarnotify.core.notify import NotifyPattern
from coarnotify.exceptions import NoModelFound, NoTypeFound
from coarnotify.patterns import (
    Accept,
    AnnounceEndorsement,
    AnnounceRelationship,
    AnnounceReview,
    AnnounceServiceResult,
    Reject,
    RequestEndorsement,
    RequestReview,
    TentativelyAccept,
    TentativelyReject,
    UndoOffer,
    UnprocessableNotification,
)

logger = logging.getLogger(__name__)

DEFAULT_MODELS: tuple[type[NotifyPattern], ...] = (
    Accept,
    AnnounceEndorsement,
    AnnounceRelationship,
    AnnounceReview,
    AnnounceServiceResult,
    Reject,
    RequestEndorsement,
    RequestReview,
    TentativelyAccept,
    TentativelyReject,
    UnprocessableNotification,
    UndoOffer,
)


class COARNotifyFactory:
    """An ordered registry of pattern classes.

    Parameters
    ----------
    models:
        The candidate classes, in priority order.  Defaults to the built-in
        pattern catalogue.
    """

    def __init__(self, models: Optional[list[type[NotifyPattern]]] = None):
        self._initial = tuple(models) if models is not None else DEFAULT_MODELS
        self._models: list[type[NotifyPattern]] = list(self._initial)

    @property
    def models(self) -> list[type[NotifyPattern]]:
        """A snapshot of the candidate classes, in priority order.

        Mutating the returned list does not affect the factory.
        """
        return list(self._models)

    def get_by_types(self, incoming_types: Union[str, list[str]]) -> Optional[type[NotifyPattern]]:
        """Return the class that best fits ``incoming_types``.

        Parameters
        ----------
        incoming_types:
            A single type token or a list of them.

        Returns
        -------
        The best-fitting class, or ``None`` if no class's ``TYPE`` is
        contained in ``incoming_types``.
        """
        if not isinstance(incoming_types, list):
            incoming_types = [incoming_types]

        candidate = None
        candidate_fit = None

        for model in self._models:
            document_types = model.TYPE if isinstance(model.TYPE, list) else [model.TYPE]
            if not all(t in incoming_types for t in document_types):
                continue
            fit = len(incoming_types) - len(document_types)
            if fit == 0:
                logger.debug("Exact model match for %s: %s", incoming_types, model.__name__)
                return model
            if candidate_fit is None or abs(fit) < abs(candidate_fit):
                candidate = model
                candidate_fit = fit

        if candidate is not None:
            logger.debug("Best model match for %s: %s", incoming_types, candidate.__name__)
        return candidate

    def get_by_object(self, data: dict[str, Any], *args: Any, **kwargs: Any) -> NotifyPattern:
        """Wrap ``data`` in an instance of the class that best fits its ``type``.

        ``data`` is handed to the constructor as-is.  Unless the caller says
        otherwise, the instance is not validated on construction and
        resolves nested patterns through this factory.

        Raises
        ------
        NoTypeFound
            If ``data`` has no ``type``.
        NoModelFound
            If no registered class fits its types.
        """
        # A shallow copy keeps ActivityStream from popping the caller's @context
        stream = ActivityStream(dict(data))
        types = stream.get_property(Properties.TYPE)
        if types is None:
            raise NoTypeFound("No type found in object")

        klass = self.get_by_types(types)
        if klass is None:
            raise NoModelFound(f"No model found for type(s): {types}")

        kwargs.setdefault("validate_stream_on_construct", False)
        kwargs.setdefault("factory", self)
        return klass(data, *args, **kwargs)

    def register(self, model: type[NotifyPattern]) -> None:
        """Add a pattern class, replacing any class that would win its dispatch.

        Registered classes are appended, so a class registered here takes
        priority over a built-in that fits the same types equally well.
        """
        existing = self.get_by_types(model.TYPE)
        if existing is not None:
            self._models.remove(existing)
            logger.debug("Replacing model %s with %s", existing.__name__, model.__name__)
        self._models.append(model)
        logger.debug("Registered model %s for %s", model.__name__, model.TYPE)

    def reset(self) -> None:
        """Restore the models this factory was created with.

        Primarily useful in tests to guarantee isolation.
        """
        self._models = list(self._initial)


DEFAULT_FACTORY = COARNotifyFactory()
