"""Utilitários para criação de índices da coleção de notícias."""
from __future__ import annotations

import logging

from pymongo.collection import Collection
from pymongo.errors import OperationFailure, PyMongoError

# IndexOptionsConflict / IndexKeySpecsConflict
_INDEX_CONFLICT_CODES = {85, 86}

_log = logging.getLogger("boletim.database")


def ensure_article_indexes(collection: Collection) -> None:
    """Garante que os índices usados nas consultas de notícias existam.

    Índices já existentes com outro nome são mantidos. Qualquer outra falha do
    MongoDB (servidor indisponível, autenticação) apenas gera um log, sem
    impedir a inicialização.
    """

    definitions: tuple[tuple[list[tuple[str, int]], dict[str, object]], ...] = (
        ([("title", 1)], {"name": "title", "background": True}),
    )

    for keys, options in definitions:
        try:
            collection.create_index(keys, **options)
        except OperationFailure as exc:
            if exc.code in _INDEX_CONFLICT_CODES:
                _log.info("Índice %s já existe com outra definição", options["name"])
                continue
            _log.error("Não foi possível criar índices de notícias: %s", exc)
            return
        except PyMongoError as exc:
            _log.error("Não foi possível criar índices de notícias: %s", exc)
            return


__all__ = ["ensure_article_indexes"]
