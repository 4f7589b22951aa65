"""
Politica de bloqueio de correntistas.

Um correntista bloqueado (ex: o proprio BlueBank, id 1) nao pode ser
alterado, excluido nem ter enderecos/contatos mexidos. Ele e reconhecido
por duas fontes:
- ids configurados em CORRENTISTAS_BLOQUEADOS (checados sem ir ao banco)
- flag `bloqueado` gravada no registro
"""
import logging
from typing import Iterable, Optional

from app.core.config import settings
from app.core.exceptions import RecursoBloqueadoError
from app.repositories.correntista import Correntista

logger = logging.getLogger(__name__)


class PoliticaBloqueio:
    """Decide se um correntista aceita operacoes de escrita."""

    def __init__(self, ids_bloqueados: Optional[Iterable[int]] = None):
        if ids_bloqueados is None:
            ids_bloqueados = settings.correntistas_bloqueados_ids
        self.ids_bloqueados = set(ids_bloqueados)

    def id_bloqueado(self, correntista_id: Optional[int]) -> bool:
        return correntista_id is not None and correntista_id in self.ids_bloqueados

    def esta_bloqueado(self, correntista: Correntista) -> bool:
        return correntista.bloqueado or self.id_bloqueado(correntista.id)

    def verificar_id(self, correntista_id: Optional[int]) -> None:
        """
        Barra a operacao pelo id, antes de qualquer acesso ao banco.

        Raises:
            RecursoBloqueadoError: Se o id esta na lista de bloqueados
        """
        if self.id_bloqueado(correntista_id):
            logger.warning(f"Operacao bloqueada para correntista {correntista_id}")
            raise RecursoBloqueadoError(identifier=correntista_id)

    def verificar(self, correntista: Correntista) -> None:
        """
        Barra a operacao pelo registro carregado (id ou flag).

        Raises:
            RecursoBloqueadoError: Se o correntista esta bloqueado
        """
        if self.esta_bloqueado(correntista):
            logger.warning(f"Operacao bloqueada para correntista {correntista.id}")
            raise RecursoBloqueadoError(identifier=correntista.id)
