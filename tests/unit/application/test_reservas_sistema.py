import asyncio
from datetime import time, timedelta

import pytest

from juegamas.api.dependencies import build_use_cases
from juegamas.application.dtos import SesionUsuario
from juegamas.domain.errors import ReservaNotFoundError, TransicionInvalidaError
from juegamas.domain.listing import FiltrosReservas
from juegamas.infrastructure.in_memory import InMemoryReservaRepo
from tests.factories import CLIENTE_ID, HOY, make_reserva


async def test_propietario_confirma_reserva_de_su_espacio(use_cases, bundle, sesion_propietario):
    await bundle["reserva_repo"].add(make_reserva(id="r-1"))

    resultado = await use_cases["confirmar_reserva"].execute("r-1", sesion_propietario)

    assert resultado.data.estado == "confirmada"
    enviada = bundle["notification_gateway"].enviadas[0]
    assert enviada.tipo == "reserva_confirmada"
    assert enviada.destinatario_id == CLIENTE_ID


async def test_propietario_ajeno_no_confirma(use_cases, bundle):
    await bundle["reserva_repo"].add(make_reserva(id="r-1"))
    ajeno = SesionUsuario(usuario_id="u-otro-prop", rol="propietario")

    with pytest.raises(ReservaNotFoundError):
        await use_cases["confirmar_reserva"].execute("r-1", ajeno)


async def test_admin_confirma_cualquier_reserva(use_cases, bundle, sesion_admin):
    await bundle["reserva_repo"].add(make_reserva(id="r-1"))

    resultado = await use_cases["confirmar_reserva"].execute("r-1", sesion_admin)

    assert resultado.data.estado == "confirmada"


async def test_confirmar_cancelada_es_transicion_invalida(use_cases, bundle, sesion_admin):
    await bundle["reserva_repo"].add(
        make_reserva(id="r-1", estado="cancelada", motivo_cancelacion="Cambio de planes")
    )

    with pytest.raises(TransicionInvalidaError):
        await use_cases["confirmar_reserva"].execute("r-1", sesion_admin)


async def test_barrido_completa_solo_confirmadas_terminadas(use_cases, bundle, clock):
    repo = bundle["reserva_repo"]
    await repo.add(make_reserva(id="r-ayer", estado="confirmada", fecha=HOY - timedelta(days=1)))
    # Hoy 10:00-11:00 locales; son las 12:00 en Santiago
    await repo.add(make_reserva(id="r-manana", estado="confirmada", fecha=HOY,
                                hora_inicio=time(10), hora_fin=time(11)))
    await repo.add(make_reserva(id="r-tarde", estado="confirmada", fecha=HOY))
    await repo.add(make_reserva(id="r-pendiente", fecha=HOY - timedelta(days=1)))

    resultado = await use_cases["completar_reservas"].execute()

    assert sorted(resultado["completadas"]) == ["r-ayer", "r-manana"]
    assert resultado["omitidas"] == []
    assert (await repo.get_by_id("r-tarde")).estado == "confirmada"
    assert (await repo.get_by_id("r-pendiente")).estado == "pendiente"

    clock.advance(hours=8)
    segundo = await use_cases["completar_reservas"].execute()
    assert segundo["completadas"] == ["r-tarde"]


async def test_barrido_omite_reservas_con_operacion_en_curso(use_cases, bundle):
    await bundle["reserva_repo"].add(
        make_reserva(id="r-1", estado="confirmada", fecha=HOY - timedelta(days=1))
    )

    async with bundle["guard"].reservar("reserva", "r-1"):
        resultado = await use_cases["completar_reservas"].execute()

    assert resultado == {"completadas": [], "omitidas": ["r-1"]}
    assert (await bundle["reserva_repo"].get_by_id("r-1")).estado == "confirmada"


class ReservaRepoConLatencia(InMemoryReservaRepo):
    """Cede el event loop en cada lectura, como lo haría una base real."""

    async def list_by_estado(self, estado):
        foto = await super().list_by_estado(estado)
        for _ in range(5):
            await asyncio.sleep(0)
        return foto

    async def get_by_id(self, reserva_id):
        await asyncio.sleep(0)
        return await super().get_by_id(reserva_id)


async def test_barrido_no_pisa_una_cancelacion_concurrente(bundle, settings, sesion_cliente):
    bundle["reserva_repo"] = ReservaRepoConLatencia()
    use_cases = build_use_cases(bundle, settings)
    repo = bundle["reserva_repo"]
    ayer = HOY - timedelta(days=1)
    await repo.add(make_reserva(id="r-a", codigo_reserva="JM-A", estado="confirmada", fecha=ayer))
    await repo.add(make_reserva(id="r-b", codigo_reserva="JM-B", estado="confirmada", fecha=ayer))

    barrido, cancelacion = await asyncio.gather(
        use_cases["completar_reservas"].execute(),
        use_cases["cancelar_reserva"].execute("r-b", "Tengo un conflicto de horario", sesion_cliente),
    )

    assert cancelacion.data.estado == "cancelada"
    assert "r-a" in barrido["completadas"]
    assert "r-b" not in barrido["completadas"]
    final = await repo.get_by_id("r-b")
    assert final.estado == "cancelada"
    assert final.motivo_cancelacion == "Tengo un conflicto de horario"


async def test_barrido_relee_y_omite_reservas_que_ya_no_estan_confirmadas(bundle, settings):
    bundle["reserva_repo"] = ReservaRepoConLatencia()
    use_cases = build_use_cases(bundle, settings)
    repo = bundle["reserva_repo"]
    await repo.add(make_reserva(id="r-1", estado="confirmada", fecha=HOY - timedelta(days=1)))

    async def cancelar_durante_el_listado():
        await asyncio.sleep(0)
        repo.reservas["r-1"].estado = "cancelada"
        repo.reservas["r-1"].motivo_cancelacion = "Se suspendió el partido"

    resultado, _ = await asyncio.gather(
        use_cases["completar_reservas"].execute(), cancelar_durante_el_listado()
    )

    assert resultado == {"completadas": [], "omitidas": []}
    assert repo.reservas["r-1"].estado == "cancelada"
    assert repo.reservas["r-1"].motivo_cancelacion == "Se suspendió el partido"


async def test_obtener_reserva_respeta_la_pertenencia(
    use_cases, bundle, sesion_cliente, sesion_otro, sesion_propietario, sesion_admin
):
    await bundle["reserva_repo"].add(make_reserva(id="r-1"))
    obtener = use_cases["obtener_reserva"]

    assert (await obtener.execute("r-1", sesion_cliente)).id == "r-1"
    assert (await obtener.execute("r-1", sesion_propietario)).id == "r-1"
    assert (await obtener.execute("r-1", sesion_admin)).id == "r-1"
    with pytest.raises(ReservaNotFoundError):
        await obtener.execute("r-1", sesion_otro)


async def test_listados_por_cliente_y_propietario(
    use_cases, bundle, sesion_cliente, sesion_otro, sesion_propietario
):
    repo = bundle["reserva_repo"]
    await repo.add(make_reserva(id="r-1"))
    await repo.add(make_reserva(id="r-2", usuario_id=sesion_otro.usuario_id))
    await repo.add(make_reserva(id="r-3", propietario_id="u-otro-prop"))

    propias = await use_cases["listar_reservas"].execute(sesion_cliente, FiltrosReservas())
    del_propietario = await use_cases["listar_reservas_propietario"].execute(
        sesion_propietario, FiltrosReservas()
    )

    assert sorted(r.id for r in propias.items) == ["r-1", "r-3"]
    assert sorted(r.id for r in del_propietario.items) == ["r-1", "r-2"]


async def test_proximas_reservas_del_cliente(use_cases, bundle, sesion_cliente):
    repo = bundle["reserva_repo"]
    for dias in (5, 1, 3, 10):
        await repo.add(make_reserva(id=f"r-{dias}", fecha=HOY + timedelta(days=dias)))

    proximas = await use_cases["proximas_reservas"].execute(sesion_cliente, limite=3)

    assert [r.id for r in proximas] == ["r-1", "r-3", "r-5"]
