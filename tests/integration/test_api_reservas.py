"""
Flujo HTTP de reservas: listado, detalle, cancelación y confirmación.
"""

from decimal import Decimal

import pytest

from tests.factories import headers_de, make_reserva

MOTIVO = "Tengo un conflicto de horario"


@pytest.fixture
def reservas(bundle):
    repo = bundle["reserva_repo"]
    for reserva in (
        make_reserva(id="r-1"),
        make_reserva(id="r-2", codigo_reserva="JM-TEST0002", estado="confirmada"),
        make_reserva(id="r-ajena", codigo_reserva="JM-TEST0003", usuario_id="u-otro"),
    ):
        repo.reservas[reserva.id] = reserva
    return repo


def test_cancelar_reserva(client, reservas, sesion_cliente):
    response = client.post(
        "/api/v1/reservas/r-1/cancelar",
        json={"motivo_cancelacion": MOTIVO},
        headers=headers_de(sesion_cliente),
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Reserva cancelada exitosamente"
    assert body["data"]["estado"] == "cancelada"
    assert body["data"]["motivo_cancelacion"] == MOTIVO
    assert Decimal(body["data"]["precio_total"]) == Decimal("18000")

    detalle = client.get("/api/v1/reservas/r-1", headers=headers_de(sesion_cliente))
    assert detalle.json()["estado"] == "cancelada"


def test_cancelar_con_motivo_corto(client, reservas, sesion_cliente):
    response = client.post(
        "/api/v1/reservas/r-1/cancelar",
        json={"motivo_cancelacion": "no"},
        headers=headers_de(sesion_cliente),
    )

    assert response.status_code == 422
    body = response.json()
    assert body["success"] is False
    assert body["code"] == "VALIDATION_ERROR"
    assert "motivo_cancelacion" in body["errors"]


def test_cancelar_sin_motivo_en_el_cuerpo(client, reservas, sesion_cliente):
    response = client.post("/api/v1/reservas/r-1/cancelar", json={}, headers=headers_de(sesion_cliente))

    assert response.status_code == 422
    assert response.json()["errors"]["motivo_cancelacion"]


def test_cancelar_reserva_ajena_es_404(client, reservas, sesion_cliente):
    response = client.post(
        "/api/v1/reservas/r-ajena/cancelar",
        json={"motivo_cancelacion": MOTIVO},
        headers=headers_de(sesion_cliente),
    )

    assert response.status_code == 404
    assert response.json()["code"] == "RESERVA_NOT_FOUND"


def test_cancelar_dos_veces_es_conflicto(client, reservas, sesion_cliente):
    headers = headers_de(sesion_cliente)
    client.post("/api/v1/reservas/r-1/cancelar", json={"motivo_cancelacion": MOTIVO}, headers=headers)

    response = client.post(
        "/api/v1/reservas/r-1/cancelar", json={"motivo_cancelacion": MOTIVO}, headers=headers
    )

    assert response.status_code == 409
    assert response.json()["code"] == "RESERVA_NO_CANCELABLE"


def test_propietario_no_puede_cancelar(client, reservas, sesion_propietario):
    response = client.post(
        "/api/v1/reservas/r-1/cancelar",
        json={"motivo_cancelacion": MOTIVO},
        headers=headers_de(sesion_propietario),
    )

    assert response.status_code == 403
    assert response.json()["code"] == "ACCESO_DENEGADO"


def test_sin_sesion_es_401(client, reservas):
    response = client.get("/api/v1/reservas")

    assert response.status_code == 401
    assert response.json()["code"] == "NO_AUTENTICADO"


def test_rol_heredado_usuario_equivale_a_cliente(client, reservas):
    response = client.get(
        "/api/v1/reservas", headers={"X-User-Id": "u-cliente", "X-User-Role": "usuario"}
    )

    assert response.status_code == 200
    assert response.json()["total"] == 2


def test_listar_reservas_con_filtro_y_paginacion(client, reservas, sesion_cliente):
    headers = headers_de(sesion_cliente)

    todas = client.get("/api/v1/reservas", params={"estado": "todas", "per_page": 1}, headers=headers)
    confirmadas = client.get("/api/v1/reservas", params={"estado": "confirmada"}, headers=headers)
    invalido = client.get("/api/v1/reservas", params={"estado": "borrada"}, headers=headers)

    assert todas.status_code == 200
    assert todas.json()["total"] == 2
    assert todas.json()["total_paginas"] == 2
    assert len(todas.json()["items"]) == 1
    assert [r["id"] for r in confirmadas.json()["items"]] == ["r-2"]
    assert invalido.status_code == 422


def test_proximas_reservas(client, reservas, sesion_cliente):
    response = client.get("/api/v1/reservas/proximas", params={"limite": 5}, headers=headers_de(sesion_cliente))

    assert response.status_code == 200
    assert sorted(r["id"] for r in response.json()) == ["r-1", "r-2"]


def test_propietario_confirma_y_lista(client, reservas, sesion_propietario):
    headers = headers_de(sesion_propietario)

    confirmar = client.post("/api/v1/reservas/r-1/confirmar", headers=headers)
    listado = client.get("/api/v1/propietario/reservas", params={"estado": "confirmada"}, headers=headers)

    assert confirmar.status_code == 200
    assert confirmar.json()["data"]["estado"] == "confirmada"
    assert sorted(r["id"] for r in listado.json()["items"]) == ["r-1", "r-2"]


def test_cliente_no_confirma(client, reservas, sesion_cliente):
    response = client.post("/api/v1/reservas/r-1/confirmar", headers=headers_de(sesion_cliente))

    assert response.status_code == 403
