# emoji_suggester/core/engine.py
"""
EmojiSearchEngine - owns the loaded LanguageIndex set and answers queries.

Public API:
  - initialize(serialized)              replace all indexes (JSON str or mapping)
  - search(query, language_id)          -> [(keyword, [emoji, ...])]
  - search_multiple(query, language_ids) -> concatenation in request order
  - search_json / search_multiple_json  JSON boundary used by the ranker

Queries fail closed: an unknown language or undecodable id list gives an
empty result, never an exception. initialize() validates the whole payload
before swapping, so a FormatError leaves the previous indexes in place.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Iterable, List, Mapping, Union

from .dictionary import load
from .errors import FormatError, QueryError
from .search_index import LanguageIndex, Match

logger = logging.getLogger(__name__)

Payload = Union[str, bytes, Mapping[str, Any]]


class EmojiSearchEngine:
    def __init__(self) -> None:
        self._indexes: Dict[str, LanguageIndex] = {}

    # setup -----------------------------------------------------------
    def initialize(self, serialized: Payload) -> None:
        """
        Load language_id -> {keyword: emoji | [emoji, ...]}.
        Idempotent; the previous index set is discarded only on success.
        """
        if isinstance(serialized, (str, bytes)):
            try:
                data = json.loads(serialized)
            except ValueError as e:
                raise FormatError(f"emoji data is not valid JSON: {e}") from e
        else:
            data = serialized

        if not isinstance(data, Mapping):
            raise FormatError("emoji data must map language ids to dictionaries")

        fresh: Dict[str, LanguageIndex] = {}
        for language_id, raw in data.items():
            if not isinstance(language_id, str) or not language_id:
                raise FormatError(f"invalid language id {language_id!r}")
            fresh[language_id] = load(language_id, raw)

        self._indexes = fresh
        logger.debug(
            "initialized %s", {k: len(v) for k, v in fresh.items()}
        )

    def languages(self) -> List[str]:
        return list(self._indexes.keys())

    def index(self, language_id: str) -> LanguageIndex:
        try:
            return self._indexes[language_id]
        except KeyError:
            raise QueryError(f"language {language_id!r} is not loaded") from None

    # queries ---------------------------------------------------------
    def search(self, query: str, language_id: str) -> List[Match]:
        try:
            idx = self.index(language_id)
        except QueryError as e:
            logger.debug("search: %s", e)
            return []
        return [entry.as_match() for entry in idx.find(query)]

    def search_multiple(self, query: str, language_ids: Iterable[str]) -> List[Match]:
        out: List[Match] = []
        seen = set()
        for language_id in language_ids:
            if language_id in seen:
                continue
            seen.add(language_id)
            out.extend(self.search(query, language_id))
        return out

    # JSON boundary ---------------------------------------------------
    def search_json(self, query: str, language_id: str) -> str:
        return json.dumps(self.search(query, language_id), ensure_ascii=False)

    def search_multiple_json(self, query: str, language_ids: str) -> str:
        try:
            ids = json.loads(language_ids)
            if not isinstance(ids, list) or not all(isinstance(i, str) for i in ids):
                raise QueryError(f"expected a JSON list of language ids, got {language_ids!r}")
        except (ValueError, QueryError) as e:
            logger.debug("search_multiple_json: %s", e)
            return "[]"
        return json.dumps(self.search_multiple(query, ids), ensure_ascii=False)

    def __repr__(self) -> str:
        return f"<EmojiSearchEngine languages={self.languages()}>"
