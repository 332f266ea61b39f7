from datetime import datetime, time, timedelta, timezone
from decimal import Decimal
from zoneinfo import ZoneInfo

import pytest

from juegamas.domain.errors import (
    ReservaNoCancelableError,
    ReservaNoFinalizadaError,
    TransicionInvalidaError,
    ValidationError,
)
from juegamas.domain.reserva_state import es_terminal, es_transicion_valida
from juegamas.domain.value_objects import FranjaHoraria
from tests.factories import AHORA, CLIENTE_ID, HOY, make_reserva

SANTIAGO = ZoneInfo("America/Santiago")


def test_transiciones_permitidas():
    assert es_transicion_valida("pendiente", "confirmada")
    assert es_transicion_valida("pendiente", "cancelada")
    assert es_transicion_valida("confirmada", "completada")
    assert not es_transicion_valida("pendiente", "completada")
    assert es_terminal("cancelada")
    assert es_terminal("completada")


def test_cancelar_pendiente_guarda_motivo():
    reserva = make_reserva()

    reserva.cancelar("Tengo un conflicto de horario", cancelado_por=CLIENTE_ID, ahora=AHORA)

    assert reserva.estado == "cancelada"
    assert reserva.motivo_cancelacion == "Tengo un conflicto de horario"
    assert reserva.cancelado_por == CLIENTE_ID
    assert reserva.updated_at == AHORA
    assert len(reserva.motivo_cancelacion) >= 10


def test_cancelar_no_modifica_el_precio():
    reserva = make_reserva(estado="confirmada", precio_total=Decimal("33000"))

    reserva.cancelar("Se enfermó un jugador", cancelado_por=CLIENTE_ID, ahora=AHORA)

    assert reserva.precio_total == Decimal("33000")


def test_motivo_corto_se_rechaza_antes_que_el_estado():
    reserva = make_reserva(estado="completada")

    with pytest.raises(ValidationError) as exc_info:
        reserva.cancelar("no", cancelado_por=CLIENTE_ID, ahora=AHORA)

    assert exc_info.value.field == "motivo_cancelacion"
    assert reserva.estado == "completada"


@pytest.mark.parametrize("estado", ["cancelada", "completada"])
def test_estados_terminales_rechazan_cancelacion(estado):
    reserva = make_reserva(estado=estado, motivo_cancelacion="Motivo anterior válido")

    with pytest.raises(ReservaNoCancelableError):
        reserva.cancelar("Tengo un conflicto de horario", cancelado_por=CLIENTE_ID, ahora=AHORA)

    assert reserva.estado == estado


@pytest.mark.parametrize("estado", ["cancelada", "completada"])
def test_estados_terminales_rechazan_toda_transicion(estado):
    reserva = make_reserva(estado=estado, fecha=HOY - timedelta(days=3))

    with pytest.raises(TransicionInvalidaError):
        reserva.confirmar(AHORA)
    with pytest.raises(TransicionInvalidaError):
        reserva.completar(AHORA, SANTIAGO)
    assert reserva.estado == estado


def test_confirmar_pendiente():
    reserva = make_reserva()

    reserva.confirmar(AHORA)

    assert reserva.estado == "confirmada"
    assert reserva.esta_activa


def test_completar_exige_que_la_franja_haya_terminado():
    # Hoy 18:00-19:00 en Santiago; AHORA son las 12:00 locales
    reserva = make_reserva(estado="confirmada", fecha=HOY)

    with pytest.raises(ReservaNoFinalizadaError):
        reserva.completar(AHORA, SANTIAGO)

    reserva.completar(AHORA + timedelta(hours=8), SANTIAGO)
    assert reserva.estado == "completada"


def test_completar_pendiente_no_es_transicion_valida():
    reserva = make_reserva(fecha=HOY - timedelta(days=1))

    with pytest.raises(TransicionInvalidaError):
        reserva.completar(AHORA, SANTIAGO)


def test_precio_debe_ser_positivo():
    with pytest.raises(ValueError):
        make_reserva(precio_total=Decimal("0"))


def test_hora_fin_debe_ser_posterior():
    with pytest.raises(ValueError):
        make_reserva(hora_inicio=time(19, 0), hora_fin=time(18, 0))


def test_franja_ha_terminado_en_hora_local():
    franja = FranjaHoraria(HOY, time(10, 0), time(11, 0))

    # 11:30 en Santiago = 14:30 UTC
    assert franja.ha_terminado(datetime(2025, 3, 10, 14, 30, tzinfo=timezone.utc), SANTIAGO)
    assert not franja.ha_terminado(datetime(2025, 3, 10, 13, 30, tzinfo=timezone.utc), SANTIAGO)
    assert franja.duracion == timedelta(hours=1)

