"""
Vocabulários fechados compartilhados entre Tickets e Orders.

- Carrier: transportadoras aceitas
- Produto: produtos vendidos

Os valores são comparados de forma exata (case-sensitive); qualquer
outro texto é rejeitado pela validação.
"""

from enum import Enum
from typing import List, Optional


class Carrier(Enum):
    """
    Transportadoras aceitas.

    Prefixos de rastreio conhecidos (detecção automática):
        6129  -> FedEx
        94    -> USPS
        1ZC6J -> UPS
        1LSC  -> OnTrac
        9261  -> DHL
    """

    FEDEX = "FedEx"
    USPS = "USPS"
    UPS = "UPS"
    ONTRAC = "OnTrac"
    DHL = "DHL"

    @classmethod
    def values(cls) -> List[str]:
        return [carrier.value for carrier in cls]

    @classmethod
    def detect_from_tracking(cls, tracking_number: str) -> Optional["Carrier"]:
        """
        Detecta transportadora pelo prefixo do número de rastreio.

        Args:
            tracking_number: Número de rastreio (qualquer caixa)

        Returns:
            Carrier correspondente ou None se prefixo desconhecido
        """
        upper = (tracking_number or "").upper()

        for prefix, carrier in _TRACKING_PREFIXES:
            if upper.startswith(prefix):
                return carrier

        return None


_TRACKING_PREFIXES = (
    ("6129", Carrier.FEDEX),
    ("94", Carrier.USPS),
    ("1ZC6J", Carrier.UPS),
    ("1LSC", Carrier.ONTRAC),
    ("9261", Carrier.DHL),
)


class Produto(Enum):
    """Produtos do catálogo."""

    LONGEVITY = "Longevity"
    GLOW = "Glow"
    CALM = "Calm"
    LEAN_MUSCLE = "Lean Muscle"
    HYDRO_BURN = "Hydro burn"
    NMN_CELL_RENEW_TONIC = "NMN Cell Renew Tonic"
    IMMUNITY_TONIC = "Immunity Tonic"
    RELIEF_TONIC = "Relief Tonic"
    CALM_TONIC = "Calm Tonic"
    RADIANCE_TONIC = "Radiance Tonic"

    @classmethod
    def values(cls) -> List[str]:
        return [produto.value for produto in cls]
