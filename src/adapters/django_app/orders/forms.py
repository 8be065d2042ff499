"""
Django Forms para validação de pedidos importados.

Normalização:
- trackingNumber em caixa alta
- carrier detectado pelo prefixo do rastreio prevalece sobre o enviado
"""

from typing import Any, Dict

from django import forms

from src.adapters.django_app.shared.forms import (
    REQUIRED,
    SchemaForm,
    TextField,
    choices_from,
)
from src.adapters.django_app.shared.validation import FormValidator
from src.core.orders.dtos import OrderInputDTO
from src.core.shared.vocabularies import Carrier, Produto


class OrderForm(SchemaForm):
    """
    Form de pedido.

    Um prefixo de rastreio conhecido define o carrier, mesmo que o
    cliente tenha enviado outro. Com prefixo desconhecido vale o carrier
    enviado; sem ele, o campo falha como obrigatório.
    """

    tracking_number = TextField()
    order_number = TextField()

    produto = forms.ChoiceField(
        choices=choices_from(Produto.values()),
        error_messages={'required': REQUIRED},
    )

    carrier = forms.ChoiceField(
        choices=choices_from(Carrier.values()),
        required=False,
    )

    def clean_tracking_number(self) -> str:
        return self.cleaned_data['tracking_number'].upper()

    def clean(self):
        cleaned_data = super().clean()

        tracking_number = cleaned_data.get('tracking_number')
        detected = Carrier.detect_from_tracking(tracking_number) if tracking_number else None

        if detected is not None:
            # carrier enviado (válido ou não) é descartado
            self.errors.pop('carrier', None)
            cleaned_data['carrier'] = detected.value
        elif 'carrier' not in self.errors and not cleaned_data.get('carrier'):
            self.add_error('carrier', REQUIRED)

        return cleaned_data


ORDER_FIELD_NAMES = {
    "trackingNumber": "tracking_number",
    "orderNumber": "order_number",
    "produto": "produto",
    "carrier": "carrier",
}


class OrderFormValidator(FormValidator[OrderInputDTO]):
    """
    Validator de pedido (POST /orders/bulk).

    id e dateImported enviados pelo cliente são ignorados.
    """

    form_class = OrderForm
    field_names = ORDER_FIELD_NAMES

    def build(self, cleaned_data: Dict[str, Any]) -> OrderInputDTO:
        return OrderInputDTO(
            tracking_number=cleaned_data['tracking_number'],
            order_number=cleaned_data['order_number'],
            produto=cleaned_data['produto'],
            carrier=cleaned_data['carrier'],
        )
