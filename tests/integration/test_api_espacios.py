from datetime import timedelta
from decimal import Decimal

import pytest

from tests.factories import AHORA, make_espacio


@pytest.fixture
def espacios(bundle):
    repo = bundle["espacio_repo"]
    repo.add(make_espacio(id=1, caracteristicas={"iluminacion", "estacionamiento"},
                          calificacion_promedio=4.2, total_resenas=30))
    repo.add(make_espacio(id=2, nombre="Piscina Temperada Ñuñoa", tipo="Piscina", ciudad="Ñuñoa",
                          precio_base=Decimal("9000"), capacidad_max=25, caracteristicas={"camarines"},
                          calificacion_promedio=4.8, total_resenas=5,
                          created_at=AHORA - timedelta(days=1)))
    repo.add(make_espacio(id=3, nombre="Gimnasio Cerrado", estado_espacio="inactivo"))
    return repo


def test_listado_publico_solo_activos(client, espacios):
    response = client.get("/api/v1/espacios")

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 2
    # Sin orden explícito: más recientes primero
    assert [e["id"] for e in body["items"]] == [2, 1]
    assert body["items"][1]["caracteristicas"] == ["estacionamiento", "iluminacion"]


@pytest.mark.parametrize(
    "params, esperados",
    [
        ({"ordenar_por": "precio_asc"}, [2, 1]),
        ({"ordenar_por": "popularidad"}, [1, 2]),
        ({"ordenar_por": "calificacion"}, [2, 1]),
        ({"ciudad": "Ñuñoa"}, [2]),
        ({"precio_max": "10000"}, [2]),
        ({"capacidad_min": 20}, [2]),
        ({"busqueda": "piscina"}, [2]),
        ({"caracteristicas": ["iluminacion", "estacionamiento"]}, [1]),
    ],
)
def test_filtros_y_orden(client, espacios, params, esperados):
    response = client.get("/api/v1/espacios", params=params)

    assert [e["id"] for e in response.json()["items"]] == esperados


def test_orden_desconocido_es_422(client, espacios):
    response = client.get("/api/v1/espacios", params={"ordenar_por": "distancia"})

    assert response.status_code == 422
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_per_page_se_limita_al_maximo(client, espacios, settings):
    response = client.get("/api/v1/espacios", params={"per_page": 1000})

    assert response.json()["por_pagina"] == settings.max_per_page


def test_opciones_de_filtro(client, espacios):
    response = client.get("/api/v1/espacios/opciones")

    assert response.json() == {
        "ciudades": ["Santiago", "Ñuñoa"],
        "tipos": ["Fútbol 5", "Piscina"],
        "caracteristicas": ["camarines", "estacionamiento", "iluminacion"],
    }


def test_detalle_de_espacio(client, espacios):
    assert client.get("/api/v1/espacios/1").json()["nombre"] == "Cancha Los Leones"
    assert client.get("/api/v1/espacios/3").status_code == 404
    assert client.get("/api/v1/espacios/99").json()["code"] == "ESPACIO_NOT_FOUND"
