"""
Entidades do Domínio de Tickets.

Este módulo define as entidades de domínio de tickets de avaria
(incidentes de envio danificado).

Entidades:
- TicketEntity: Registro de um envio danificado
- ShippingService: Níveis de serviço de envio
- DamageType: Categorias de avaria

Regras de Negócio Encapsuladas:
- Conversão dos valores textuais para os vocabulários fechados
- Campos opcionais vazios normalizados para None
- Identidade por ID de sistema (atribuído pelo repositório)
"""

from dataclasses import dataclass, field, fields
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from src.core.shared.vocabularies import Carrier, Produto


class ShippingService(Enum):
    """Níveis de serviço de envio contratados."""

    FEDEX_2_DAY = "FedEx 2 Day (by end of the day in two days)"
    FEDEX_2_DAY_AM = "FedEx 2 Day A.M (by 9 AM in two days)"
    FEDEX_EXPRESS_SAVER = "FedEx Express Saver"
    FEDEX_GROUND_HOME_DELIVERY = "FedEx Ground Home Delivery"
    FEDEX_PRIORITY_OVERNIGHT = "FedEx Priority Overnight (by 12:00 PM next day)"
    FEDEX_STANDARD_OVERNIGHT = "FedEx Standard Overnight (by end of the day next day)"
    SHIPMONK_ECONOMY = "ShipMonk Economy"
    SHIPMONK_STANDARD = "ShipMonk Standard"
    SHIPMONK_2_DAY = "ShipMonk 2 Day"
    UPS_GROUND = "UPS Ground"
    UPS_3_DAY_SELECT = "UPS 3 Day Select"
    UPS_2ND_DAY_AIR = "UPS 2nd Day Air (by end of the day in two days)"
    UPS_NEXT_DAY_AIR_SAVER = "UPS Next Day Air Saver (by end of the day next day)"
    USPS_PRIORITY_MAIL_EXPRESS = "USPS Priority Mail Express"
    USPS_GROUND_ADVANTAGE = "USPS Ground Advantage"
    UPS_NEXT_DAY_AIR = "UPS Next Day Air (by 10:30 AM next day)"

    @classmethod
    def values(cls) -> List[str]:
        return [service.value for service in cls]


class DamageType(Enum):
    """Categorias de avaria reportadas."""

    QUEBRADO = "Quebrado"
    MANCHADO = "Manchado"
    AMASSADO = "Amassado"
    FALTANDO_PRODUTO = "Faltando Produto"
    EMBALAGEM_DANIFICADA = "Embalagem danificada"
    CARRIER_DAMAGE = "Carrier Damage"

    @classmethod
    def values(cls) -> List[str]:
        return [damage.value for damage in cls]


@dataclass
class TicketEntity:
    """
    Entidade de Domínio: Ticket de avaria.

    Invariantes:
    - id é atribuído uma única vez pelo repositório e nunca muda
    - ticket_id é único entre todos os tickets vivos (garantido pelo repositório)
    - damage_types tem ao menos um item na criação (garantido pela validação)
    - ticket_url, observations e notes são None quando vazios, nunca ""

    Attributes:
        id: Identificador de sistema (UUID, opaco)
        ticket_id: Identificador humano atribuído externamente
        order_number: Número do pedido
        tracking_number: Número de rastreio
        carrier: Transportadora
        service: Nível de serviço
        produto: Produto avariado
        damage_types: Categorias de avaria (ordem preservada, sem deduplicar)
        date_reported: Data/hora do reporte
        ticket_url: Link do ticket no sistema de atendimento
        observations: Observações livres
        notes: Notas internas

    Example:
        ticket = TicketEntity.criar(
            ticket_id="TICKET-001",
            order_number="ORD-12345",
            tracking_number="6129-ABC-DEF",
            carrier="FedEx",
            service="FedEx Express Saver",
            produto="Glow",
            damage_types=["Quebrado"],
            date_reported=datetime.now(timezone.utc),
        )
    """

    ticket_id: str
    order_number: str
    tracking_number: str
    carrier: Carrier
    service: ShippingService
    produto: Produto
    damage_types: List[DamageType] = field(default_factory=list)
    date_reported: Optional[datetime] = None
    ticket_url: Optional[str] = None
    observations: Optional[str] = None
    notes: Optional[str] = None

    # Atribuído pelo repositório
    id: Optional[str] = None

    OPTIONAL_TEXT_FIELDS = ("ticket_url", "observations", "notes")

    @classmethod
    def criar(cls, **dados: Any) -> "TicketEntity":
        """
        Factory method a partir de dados já validados.

        Aceita valores textuais ou membros dos enums. O ID não é
        aceito aqui: quem atribui é o repositório.

        Raises:
            ValueError: Se algum valor não pertence ao vocabulário
            TypeError: Se algum campo é desconhecido
        """
        dados = cls.normalizar_campos(dados)
        dados.pop("id", None)
        return cls(**dados)

    @classmethod
    def normalizar_campos(cls, dados: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Converte valores textuais para enums e opcionais vazios para None.

        Usado tanto na criação quanto em atualizações parciais;
        apenas as chaves presentes são convertidas.
        """
        normalizado = dict(dados)

        if "carrier" in normalizado:
            normalizado["carrier"] = Carrier(_valor(normalizado["carrier"]))
        if "service" in normalizado:
            normalizado["service"] = ShippingService(_valor(normalizado["service"]))
        if "produto" in normalizado:
            normalizado["produto"] = Produto(_valor(normalizado["produto"]))
        if "damage_types" in normalizado:
            normalizado["damage_types"] = [
                DamageType(_valor(damage)) for damage in normalizado["damage_types"]
            ]

        for nome in cls.OPTIONAL_TEXT_FIELDS:
            if nome in normalizado:
                normalizado[nome] = normalizado[nome] or None

        return normalizado

    @classmethod
    def campos_editaveis(cls) -> List[str]:
        """Campos que uma atualização parcial pode alterar."""
        return [f.name for f in fields(cls) if f.name != "id"]

    def __repr__(self) -> str:
        return (
            f"TicketEntity("
            f"id={(self.id or '')[:8]}..., "
            f"ticket_id='{self.ticket_id}', "
            f"carrier={self.carrier.value}, "
            f"produto={self.produto.value}"
            f")"
        )


def _valor(value: Any) -> Any:
    """Aceita membro de enum ou valor bruto."""
    return value.value if isinstance(value, Enum) else value
