"""
Django Forms para validação de tickets.

Forms são DRIVING ADAPTERS que validam dados antes de
passar para os Use Cases.

Responsabilidades:
- Validação estrutural (campos obrigatórios, tipos, vocabulários)
- Sanitização de entrada
- Mensagens de erro por campo

Princípios:
- Forms NÃO contêm lógica de negócio
- Unicidade de ticketId é verificada no Core (DuplicateChecker/Repositório)
"""

from typing import Any, Dict

from django import forms
from django.core.validators import URLValidator

from src.adapters.django_app.shared.forms import (
    REQUIRED,
    CoercedDateTimeField,
    SchemaForm,
    TextField,
    choices_from,
)
from src.adapters.django_app.shared.validation import FormValidator
from src.core.shared.vocabularies import Carrier, Produto
from src.core.tickets.dtos import TicketInputDTO
from src.core.tickets.entities import DamageType, ShippingService

SELECT_DAMAGE_TYPE = "Select at least one damage type"


class TicketForm(SchemaForm):
    """
    Form de ticket (criação, importação e PATCH parcial).

    Valida dados antes de passar para CriarTicketService /
    ImportarTicketsService / AtualizarTicketService.
    """

    ticket_id = TextField()
    order_number = TextField()
    tracking_number = TextField()

    carrier = forms.ChoiceField(
        choices=choices_from(Carrier.values()),
        error_messages={'required': REQUIRED},
    )

    service = forms.ChoiceField(
        choices=choices_from(ShippingService.values()),
        error_messages={'required': REQUIRED},
    )

    produto = forms.ChoiceField(
        choices=choices_from(Produto.values()),
        error_messages={'required': REQUIRED},
    )

    damage_types = forms.MultipleChoiceField(
        choices=choices_from(DamageType.values()),
        error_messages={
            'required': SELECT_DAMAGE_TYPE,
            'invalid_list': 'Expected array',
        },
    )

    date_reported = CoercedDateTimeField()

    ticket_url = TextField(
        required=False,
        validators=[URLValidator()],
        error_messages={'invalid': 'Invalid url'},
    )

    observations = TextField(required=False)
    notes = TextField(required=False)


# Nome JSON (camelCase) -> campo do form
TICKET_FIELD_NAMES = {
    "ticketId": "ticket_id",
    "orderNumber": "order_number",
    "trackingNumber": "tracking_number",
    "carrier": "carrier",
    "service": "service",
    "produto": "produto",
    "damageTypes": "damage_types",
    "dateReported": "date_reported",
    "ticketUrl": "ticket_url",
    "observations": "observations",
    "notes": "notes",
}


class TicketFormValidator(FormValidator[TicketInputDTO]):
    """
    Validator de ticket completo (POST /tickets e importação em lote).

    Example:
        result = TicketFormValidator().validate({"ticketId": "T-1", ...})
        if result.is_valid:
            dto = result.value
    """

    form_class = TicketForm
    field_names = TICKET_FIELD_NAMES

    def build(self, cleaned_data: Dict[str, Any]) -> TicketInputDTO:
        return TicketInputDTO(
            ticket_id=cleaned_data['ticket_id'],
            order_number=cleaned_data['order_number'],
            tracking_number=cleaned_data['tracking_number'],
            carrier=cleaned_data['carrier'],
            service=cleaned_data['service'],
            produto=cleaned_data['produto'],
            damage_types=tuple(cleaned_data['damage_types']),
            date_reported=cleaned_data['date_reported'],
            ticket_url=cleaned_data.get('ticket_url') or None,
            observations=cleaned_data.get('observations') or None,
            notes=cleaned_data.get('notes') or None,
        )


class TicketPatchFormValidator(FormValidator[Dict[str, Any]]):
    """
    Validator parcial (PATCH /tickets/{id}).

    Retorna apenas os campos enviados, com nomes de campo da entidade,
    prontos para AtualizarTicketInputDTO.alteracoes.
    """

    form_class = TicketForm
    field_names = TICKET_FIELD_NAMES
    partial = True

    def build(self, cleaned_data: Dict[str, Any]) -> Dict[str, Any]:
        alteracoes = dict(cleaned_data)

        if 'damage_types' in alteracoes:
            alteracoes['damage_types'] = list(alteracoes['damage_types'])

        return alteracoes
