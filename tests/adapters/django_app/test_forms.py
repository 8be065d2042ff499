"""
Testes para o Pipeline de Validação (Django Forms -> RecordValidator).

Testa:
- TicketFormValidator: campos obrigatórios, vocabulários, datas, URL
- TicketPatchFormValidator: validação parcial
- OrderFormValidator: caixa alta e detecção de transportadora
- Entradas que não são objeto
"""

from datetime import datetime, timezone
from unittest.mock import patch

import pytest

from src.adapters.django_app.orders.forms import OrderFormValidator
from src.adapters.django_app.tickets.forms import (
    TicketFormValidator,
    TicketPatchFormValidator,
)
from src.core.orders.dtos import OrderInputDTO
from src.core.shared.validation import RecordValidator
from src.core.tickets.dtos import TicketInputDTO


class TestTicketFormValidator:
    """Testes para validação completa de ticket."""

    def test_satisfaz_protocolo(self):
        assert isinstance(TicketFormValidator(), RecordValidator)

    def test_ticket_valido(self, ticket_payload):
        result = TicketFormValidator().validate(
            ticket_payload(ticketUrl="https://example.com/t/1", notes="ok")
        )

        assert result.is_valid
        dto = result.value
        assert isinstance(dto, TicketInputDTO)
        assert dto.ticket_id == "T1"
        assert dto.damage_types == ("Quebrado",)
        assert dto.date_reported == datetime(2025, 10, 20, 10, 30, tzinfo=timezone.utc)
        assert dto.ticket_url == "https://example.com/t/1"
        assert dto.notes == "ok"
        assert dto.observations is None

    def test_opcionais_vazios_viram_none(self, ticket_payload):
        result = TicketFormValidator().validate(
            ticket_payload(ticketUrl="", observations="", notes=None)
        )

        assert result.is_valid
        assert result.value.ticket_url is None
        assert result.value.observations is None
        assert result.value.notes is None

    def test_damage_types_vazio(self, ticket_payload):
        result = TicketFormValidator().validate(ticket_payload(damageTypes=[]))

        assert not result.is_valid
        assert result.errors == ('Select at least one damage type at "damageTypes"',)
        assert "at least one damage type" in result.message

    def test_damage_types_nao_lista(self, ticket_payload):
        result = TicketFormValidator().validate(ticket_payload(damageTypes="Quebrado"))

        assert not result.is_valid
        assert 'at "damageTypes"' in result.message

    def test_damage_type_fora_do_vocabulario(self, ticket_payload):
        result = TicketFormValidator().validate(ticket_payload(damageTypes=["Perdido"]))

        assert not result.is_valid
        assert 'at "damageTypes"' in result.errors[0]

    def test_carrier_case_sensitive(self, ticket_payload):
        result = TicketFormValidator().validate(ticket_payload(carrier="fedex"))

        assert not result.is_valid
        assert result.errors[0].endswith('at "carrier"')

    def test_campo_obrigatorio_ausente(self, ticket_payload):
        payload = ticket_payload()
        del payload["service"]

        result = TicketFormValidator().validate(payload)

        assert result.errors == ('Required at "service"',)
        assert result.message == 'Validation error: Required at "service"'

    def test_varios_erros_na_mensagem(self, ticket_payload):
        result = TicketFormValidator().validate(ticket_payload(ticketId="", orderNumber=""))

        assert result.message == (
            'Validation error: Required at "ticketId"; Required at "orderNumber"'
        )

    def test_ticket_id_lista_rejeitado(self, ticket_payload):
        result = TicketFormValidator().validate(ticket_payload(ticketId=["T1"]))

        assert result.errors == ('Expected string, received array at "ticketId"',)

    def test_numero_rejeitado_como_texto(self, ticket_payload):
        result = TicketFormValidator().validate(ticket_payload(orderNumber=12345))

        assert result.errors == ('Expected string, received number at "orderNumber"',)

    def test_ticket_id_com_espacos_preservado(self, ticket_payload):
        result = TicketFormValidator().validate(ticket_payload(ticketId=" T1 "))

        assert result.value.ticket_id == " T1 "

    def test_observacoes_so_com_espacos_preservadas(self, ticket_payload):
        result = TicketFormValidator().validate(ticket_payload(observations="  ", notes=" "))

        assert result.value.observations == "  "
        assert result.value.notes == " "

    def test_data_em_epoch_ms(self, ticket_payload):
        result = TicketFormValidator().validate(ticket_payload(dateReported=1700000000000))

        assert result.value.date_reported == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)

    @pytest.mark.parametrize("valor", ["ontem", True, {"d": 1}, None])
    def test_data_invalida(self, ticket_payload, valor):
        result = TicketFormValidator().validate(ticket_payload(dateReported=valor))

        assert not result.is_valid
        assert result.errors[0].endswith('at "dateReported"')

    def test_url_invalida(self, ticket_payload):
        result = TicketFormValidator().validate(ticket_payload(ticketUrl="not a url"))

        assert result.errors == ('Invalid url at "ticketUrl"',)

    def test_ignora_chaves_desconhecidas(self, ticket_payload):
        result = TicketFormValidator().validate(ticket_payload(id="forjado", extra=1))

        assert result.is_valid

    @pytest.mark.parametrize(
        "raw, tipo",
        [(None, "null"), ([], "array"), ("x", "string"), (3, "number"), (False, "boolean")],
    )
    def test_item_que_nao_e_objeto(self, raw, tipo):
        result = TicketFormValidator().validate(raw)

        assert result.errors == (f"Expected object, received {tipo}",)

    def test_falha_inesperada_vira_validation_failed(self, ticket_payload):
        with patch.object(TicketFormValidator, "build", side_effect=RuntimeError("boom")):
            result = TicketFormValidator().validate(ticket_payload())

        assert not result.is_valid
        assert result.message == "Validation failed"


class TestTicketPatchFormValidator:
    """Testes para validação parcial (PATCH)."""

    def test_valida_apenas_campos_enviados(self):
        result = TicketPatchFormValidator().validate({"notes": "x"})

        assert result.is_valid
        assert result.value == {"notes": "x"}

    def test_regras_iguais_a_criacao(self):
        result = TicketPatchFormValidator().validate({"damageTypes": []})

        assert result.errors == ('Select at least one damage type at "damageTypes"',)

    def test_converte_nomes_para_entidade(self):
        result = TicketPatchFormValidator().validate(
            {"ticketId": "T9", "damageTypes": ["Amassado", "Manchado"], "carrier": "DHL"}
        )

        assert result.value == {
            "ticket_id": "T9",
            "damage_types": ["Amassado", "Manchado"],
            "carrier": "DHL",
        }

    def test_corpo_vazio(self):
        result = TicketPatchFormValidator().validate({})

        assert result.is_valid
        assert result.value == {}

    def test_ticket_id_vazio_rejeitado(self):
        result = TicketPatchFormValidator().validate({"ticketId": ""})

        assert result.errors == ('Required at "ticketId"',)


class TestOrderFormValidator:
    """Testes para validação de pedidos."""

    def test_tracking_em_caixa_alta_e_carrier_detectado(self, order_payload):
        result = OrderFormValidator().validate(order_payload())

        assert result.value == OrderInputDTO(
            tracking_number="1ZC6J0001",
            order_number="ORD-2001",
            produto="Longevity",
            carrier="UPS",
        )

    def test_prefixo_conhecido_prevalece_sobre_carrier_enviado(self, order_payload):
        result = OrderFormValidator().validate(
            order_payload(trackingNumber="6129XYZ", carrier="UPS")
        )

        assert result.value.carrier == "FedEx"

    def test_prefixo_conhecido_descarta_carrier_invalido(self, order_payload):
        result = OrderFormValidator().validate(order_payload(carrier="Correios"))

        assert result.is_valid
        assert result.value.carrier == "UPS"

    def test_prefixo_desconhecido_usa_carrier_enviado(self, order_payload):
        result = OrderFormValidator().validate(
            order_payload(trackingNumber="XYZ", carrier="DHL")
        )

        assert result.value.carrier == "DHL"

    def test_carrier_vazio_detectado(self, order_payload):
        result = OrderFormValidator().validate(
            order_payload(trackingNumber="612999", carrier="")
        )

        assert result.value.carrier == "FedEx"

    def test_prefixo_desconhecido_sem_carrier(self, order_payload):
        result = OrderFormValidator().validate(order_payload(trackingNumber="XYZ"))

        assert result.errors == ('Required at "carrier"',)

    def test_carrier_invalido(self, order_payload):
        result = OrderFormValidator().validate(
            order_payload(trackingNumber="XYZ", carrier="Correios")
        )

        assert not result.is_valid
        assert result.errors[0].endswith('at "carrier"')

    def test_produto_obrigatorio(self, order_payload):
        payload = order_payload()
        del payload["produto"]

        result = OrderFormValidator().validate(payload)

        assert result.errors == ('Required at "produto"',)

    def test_ignora_id_e_date_imported(self, order_payload):
        result = OrderFormValidator().validate(
            order_payload(id="x", dateImported="2000-01-01")
        )

        assert result.is_valid
