"""
Testes de integração da API (URLs + Views + Container + Core).

Sem mocks: cada teste começa com container novo e repositórios vazios.
"""

import pytest

pytestmark = pytest.mark.integration


class TestTicketsFlow:
    """Fluxo completo de tickets via HTTP."""

    def test_crud_completo(self, client, api_json, ticket_payload):
        status, criado = api_json(client, 'post', '/api/tickets', ticket_payload())
        assert status == 201
        ticket_id = criado['id']

        status, obtido = api_json(client, 'get', f'/api/tickets/{ticket_id}')
        assert status == 200
        assert obtido == criado

        status, atualizado = api_json(client, 'patch', f'/api/tickets/{ticket_id}', {'notes': 'x'})
        assert status == 200
        assert atualizado['notes'] == 'x'
        assert {k: v for k, v in atualizado.items() if k != 'notes'} == {
            k: v for k, v in criado.items() if k != 'notes'
        }

        status, _ = api_json(client, 'delete', f'/api/tickets/{ticket_id}')
        assert status == 204

        status, erro = api_json(client, 'get', f'/api/tickets/{ticket_id}')
        assert status == 404
        assert erro == {'error': 'Ticket not found'}

    def test_ticket_id_duplicado(self, client, api_json, ticket_payload):
        api_json(client, 'post', '/api/tickets', ticket_payload())

        status, erro = api_json(client, 'post', '/api/tickets', ticket_payload())

        assert status == 400
        assert erro == {'error': 'Ticket ID T1 already exists'}
        assert len(api_json(client, 'get', '/api/tickets')[1]) == 1

    def test_damage_types_vazio(self, client, api_json, ticket_payload):
        status, erro = api_json(client, 'post', '/api/tickets', ticket_payload(damageTypes=[]))

        assert status == 400
        assert 'at least one damage type' in erro['error']

    def test_patch_conflito_preserva_ticket_id(self, client, api_json, ticket_payload):
        _, t1 = api_json(client, 'post', '/api/tickets', ticket_payload(ticketId='T1'))
        api_json(client, 'post', '/api/tickets', ticket_payload(ticketId='T2'))

        status, erro = api_json(client, 'patch', f"/api/tickets/{t1['id']}", {'ticketId': 'T2'})

        assert status == 400
        assert erro == {'error': 'Ticket ID T2 already exists'}
        assert api_json(client, 'get', f"/api/tickets/{t1['id']}")[1]['ticketId'] == 'T1'

    def test_patch_inexistente(self, client, api_json):
        status, _ = api_json(client, 'patch', '/api/tickets/nao-existe', {'notes': 'x'})

        assert status == 404

    def test_patch_damage_types_vazio(self, client, api_json, ticket_payload):
        _, t1 = api_json(client, 'post', '/api/tickets', ticket_payload())

        status, erro = api_json(client, 'patch', f"/api/tickets/{t1['id']}", {'damageTypes': []})

        assert status == 400
        assert 'at least one damage type' in erro['error']

    def test_patch_corpo_vazio_devolve_ticket_inalterado(self, client, api_json, ticket_payload):
        _, t1 = api_json(client, 'post', '/api/tickets', ticket_payload())

        status, data = api_json(client, 'patch', f"/api/tickets/{t1['id']}", {})

        assert status == 200
        assert data == t1

    def test_patch_apenas_chaves_ignoradas(self, client, api_json, ticket_payload):
        _, t1 = api_json(client, 'post', '/api/tickets', ticket_payload())

        status, data = api_json(client, 'patch', f"/api/tickets/{t1['id']}", {'id': 'x'})

        assert status == 200
        assert data == t1

    def test_patch_corpo_vazio_inexistente(self, client, api_json):
        status, erro = api_json(client, 'patch', '/api/tickets/nao-existe', {})

        assert status == 404
        assert erro == {'error': 'Ticket not found'}

    def test_ticket_id_com_espacos_e_distinto(self, client, api_json, ticket_payload):
        api_json(client, 'post', '/api/tickets', ticket_payload(ticketId='T1'))

        status, criado = api_json(client, 'post', '/api/tickets', ticket_payload(ticketId=' T1 '))

        assert status == 201
        assert criado['ticketId'] == ' T1 '

    def test_ticket_id_numerico_rejeitado(self, client, api_json, ticket_payload):
        status, erro = api_json(client, 'post', '/api/tickets', ticket_payload(ticketId=42))

        assert status == 400
        assert erro == {
            'error': 'Validation error: Expected string, received number at "ticketId"'
        }

    def test_delete_inexistente(self, client, api_json):
        status, erro = api_json(client, 'delete', '/api/tickets/nao-existe')

        assert status == 404
        assert erro == {'error': 'Ticket not found'}

    def test_bulk_parcial(self, client, api_json, ticket_payload):
        api_json(client, 'post', '/api/tickets', ticket_payload(ticketId='EXISTE'))

        status, data = api_json(client, 'post', '/api/tickets/bulk', {'tickets': [
            ticket_payload(ticketId='A'),
            ticket_payload(ticketId='EXISTE'),
            {'ticketId': 'B'},
            'lixo',
        ]})

        assert status == 201
        assert data['imported'] == 1
        assert data['total'] == 4
        assert data['errors'][0] == 'Ticket 2 (ID: EXISTE): Duplicate entry'
        assert data['errors'][1].startswith('Ticket 3: Validation error: ')
        assert data['errors'][2] == 'Ticket 4: Validation error: Expected object, received string'
        assert [t['ticketId'] for t in data['tickets']] == ['A']

    def test_bulk_sem_errors_omite_chave(self, client, api_json, ticket_payload):
        status, data = api_json(client, 'post', '/api/tickets/bulk', {
            'tickets': [ticket_payload(ticketId='A'), ticket_payload(ticketId='B')]
        })

        assert status == 201
        assert 'errors' not in data
        assert data['imported'] == 2

    def test_bulk_nao_array(self, client, api_json):
        status, erro = api_json(client, 'post', '/api/tickets/bulk', {'tickets': 'x'})

        assert status == 400
        assert erro == {'error': 'Invalid request: tickets must be an array'}

    def test_bulk_nenhum_valido(self, client, api_json):
        status, erro = api_json(client, 'post', '/api/tickets/bulk', {'tickets': [{}]})

        assert status == 400
        assert erro['error'] == 'No valid tickets to import'
        assert len(erro['errors']) == 1

    def test_bulk_duplicata_no_lote_desfaz(self, client, api_json, ticket_payload):
        status, erro = api_json(client, 'post', '/api/tickets/bulk', {
            'tickets': [ticket_payload(ticketId='T1'), ticket_payload(ticketId='T1')]
        })

        assert status == 400
        assert erro == {'error': 'Ticket ID T1 already exists'}
        assert api_json(client, 'get', '/api/tickets')[1] == []

    def test_delete_all(self, client, api_json, ticket_payload):
        api_json(client, 'post', '/api/tickets', ticket_payload(ticketId='A'))
        api_json(client, 'post', '/api/tickets', ticket_payload(ticketId='B'))

        status, data = api_json(client, 'delete', '/api/tickets')

        assert status == 200
        assert data == {'deletedCount': 2}
        assert api_json(client, 'get', '/api/tickets')[1] == []

    def test_filtros_e_estatisticas(self, client, api_json, ticket_payload):
        api_json(client, 'post', '/api/tickets', ticket_payload(ticketId='A', carrier='UPS'))
        api_json(client, 'post', '/api/tickets', ticket_payload(
            ticketId='B', damageTypes=['Manchado', 'Amassado']
        ))

        _, por_carrier = api_json(client, 'get', '/api/tickets?carrier=UPS')
        _, por_avaria = api_json(client, 'get', '/api/tickets?damageType=Amassado')
        _, stats = api_json(client, 'get', '/api/tickets/stats')

        assert [t['ticketId'] for t in por_carrier] == ['A']
        assert [t['ticketId'] for t in por_avaria] == ['B']
        assert stats['total'] == 2
        assert stats['topProduto'] == {'name': 'Glow', 'value': 2}


class TestOrdersFlow:
    """Fluxo completo de pedidos via HTTP."""

    def test_importa_lista_e_obtem(self, client, api_json, order_payload):
        status, data = api_json(client, 'post', '/api/orders/bulk', {'orders': [
            order_payload(),
            order_payload(trackingNumber='XYZ'),
            order_payload(),
        ]})

        assert status == 201
        assert data['imported'] == 2
        assert data['errors'] == ['Order 2: Validation error: Required at "carrier"']
        assert data['orders'][0]['trackingNumber'] == '1ZC6J0001'
        assert data['orders'][0]['carrier'] == 'UPS'

        _, orders = api_json(client, 'get', '/api/orders')
        assert len(orders) == 2

        status, order = api_json(client, 'get', f"/api/orders/{orders[0]['id']}")
        assert status == 200
        assert order['dateImported'] is not None

    def test_prefixo_do_rastreio_define_carrier(self, client, api_json, order_payload):
        status, data = api_json(client, 'post', '/api/orders/bulk', {'orders': [
            order_payload(trackingNumber='6129XYZ', carrier='UPS'),
        ]})

        assert status == 201
        assert data['orders'][0]['carrier'] == 'FedEx'

    def test_delete_all_e_estatisticas(self, client, api_json, order_payload):
        api_json(client, 'post', '/api/orders/bulk', {'orders': [order_payload()]})

        _, stats = api_json(client, 'get', '/api/orders/stats')
        _, removidos = api_json(client, 'delete', '/api/orders')

        assert stats['topCarrier'] == {'name': 'UPS', 'value': 1}
        assert removidos == {'deletedCount': 1}


class TestHealth:

    def test_health(self, client, api_json):
        assert api_json(client, 'get', '/health') == (200, {'status': 'ok'})
