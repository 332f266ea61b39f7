from unittest.mock import AsyncMock

import pytest

from juegamas.application.interfaces import FakeClock, NotificationResult
from juegamas.application.interfaces.reserva_repo import ReservaRepo
from juegamas.application.submission_guard import OperacionesEnCurso
from juegamas.application.use_cases.cancelar_reserva import CancelarReservaUseCase
from juegamas.domain.errors import (
    OperacionEnCursoError,
    ReservaNoCancelableError,
    ReservaNotFoundError,
    ValidationError,
)
from juegamas.infrastructure.in_memory import NoopTransactionManager
from tests.factories import AHORA, CLIENTE_ID, PROPIETARIO_ID, make_reserva

MOTIVO = "Tengo un conflicto de horario"


@pytest.fixture
async def reserva_repo(bundle):
    repo = bundle["reserva_repo"]
    await repo.add(make_reserva(id="r-1"))
    return repo


async def test_motivo_corto_se_rechaza_sin_tocar_el_repositorio(sesion_cliente):
    repo = AsyncMock(spec=ReservaRepo)
    use_case = CancelarReservaUseCase(
        reserva_repo=repo,
        transaction_manager=NoopTransactionManager(),
        clock=FakeClock(AHORA),
        guard=OperacionesEnCurso(),
    )

    with pytest.raises(ValidationError) as exc_info:
        await use_case.execute("r-1", "no", sesion_cliente)

    assert exc_info.value.message == "El motivo de cancelación debe tener al menos 10 caracteres"
    repo.get_by_id.assert_not_called()
    repo.save.assert_not_called()


async def test_cancela_pendiente_y_retorna_la_reserva_releida(use_cases, reserva_repo, sesion_cliente):
    resultado = await use_cases["cancelar_reserva"].execute("r-1", MOTIVO, sesion_cliente)

    assert resultado.success
    assert resultado.message == "Reserva cancelada exitosamente"
    assert resultado.data.estado == "cancelada"
    assert resultado.data.motivo_cancelacion == MOTIVO
    assert resultado.data.cancelado_por == CLIENTE_ID
    assert resultado.data.updated_at == AHORA

    guardada = await reserva_repo.get_by_id("r-1")
    assert guardada.estado == "cancelada"
    assert guardada.motivo_cancelacion == MOTIVO


async def test_notifica_al_propietario(use_cases, bundle, reserva_repo, sesion_cliente):
    await use_cases["cancelar_reserva"].execute("r-1", MOTIVO, sesion_cliente)

    enviadas = bundle["notification_gateway"].enviadas
    assert len(enviadas) == 1
    assert enviadas[0].tipo == "reserva_cancelada"
    assert enviadas[0].destinatario_id == PROPIETARIO_ID
    assert enviadas[0].datos["motivo"] == MOTIVO


async def test_reserva_ajena_se_reporta_como_inexistente(use_cases, reserva_repo, sesion_otro):
    with pytest.raises(ReservaNotFoundError):
        await use_cases["cancelar_reserva"].execute("r-1", MOTIVO, sesion_otro)

    assert (await reserva_repo.get_by_id("r-1")).estado == "pendiente"


async def test_reserva_inexistente(use_cases, sesion_cliente):
    with pytest.raises(ReservaNotFoundError):
        await use_cases["cancelar_reserva"].execute("r-404", MOTIVO, sesion_cliente)


@pytest.mark.parametrize("estado", ["cancelada", "completada"])
async def test_estado_terminal_no_se_cancela(use_cases, bundle, sesion_cliente, estado):
    await bundle["reserva_repo"].add(
        make_reserva(id="r-t", estado=estado, motivo_cancelacion="Motivo de antes")
    )

    with pytest.raises(ReservaNoCancelableError):
        await use_cases["cancelar_reserva"].execute("r-t", MOTIVO, sesion_cliente)

    guardada = await bundle["reserva_repo"].get_by_id("r-t")
    assert guardada.estado == estado
    assert guardada.motivo_cancelacion == "Motivo de antes"


async def test_fallo_de_notificacion_no_revierte_la_cancelacion(bundle, reserva_repo, sesion_cliente):
    gateway = AsyncMock()
    gateway.send.side_effect = RuntimeError("webhook caído")
    use_case = CancelarReservaUseCase(
        reserva_repo=reserva_repo,
        transaction_manager=bundle["tx_manager"],
        clock=bundle["clock"],
        guard=bundle["guard"],
        notification_gateway=gateway,
    )

    resultado = await use_case.execute("r-1", MOTIVO, sesion_cliente)

    assert resultado.success
    assert (await reserva_repo.get_by_id("r-1")).estado == "cancelada"
    gateway.send.assert_awaited_once()


async def test_notificacion_no_entregada_tampoco_revierte(bundle, reserva_repo, sesion_cliente):
    gateway = AsyncMock()
    gateway.send.return_value = NotificationResult(status="FAILED", error_code="NON_2XX")
    use_case = CancelarReservaUseCase(
        reserva_repo=reserva_repo,
        transaction_manager=bundle["tx_manager"],
        clock=bundle["clock"],
        guard=bundle["guard"],
        notification_gateway=gateway,
    )

    resultado = await use_case.execute("r-1", MOTIVO, sesion_cliente)

    assert resultado.data.estado == "cancelada"


async def test_segunda_cancelacion_en_curso_se_rechaza(use_cases, bundle, reserva_repo, sesion_cliente):
    guard = bundle["guard"]

    async with guard.reservar("reserva", "r-1"):
        with pytest.raises(OperacionEnCursoError):
            await use_cases["cancelar_reserva"].execute("r-1", MOTIVO, sesion_cliente)

    # Liberada la primera, la operación procede
    resultado = await use_cases["cancelar_reserva"].execute("r-1", MOTIVO, sesion_cliente)
    assert resultado.data.estado == "cancelada"


async def test_la_guardia_se_libera_tras_un_error(use_cases, bundle, sesion_cliente):
    with pytest.raises(ReservaNotFoundError):
        await use_cases["cancelar_reserva"].execute("r-404", MOTIVO, sesion_cliente)

    assert not bundle["guard"].esta_en_curso("reserva", "r-404")
