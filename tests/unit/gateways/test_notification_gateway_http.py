import unittest
from unittest.mock import AsyncMock, MagicMock, patch

import httpx

from juegamas.application.interfaces import Notificacion
from juegamas.infrastructure.circuit_breaker import crear_breaker
from juegamas.infrastructure.gateways.notification_gateway_http import HttpNotificationGateway


class TestHttpNotificationGateway(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.breaker = crear_breaker("test_notification", fail_max=5, reset_timeout=60)
        self.gateway = HttpNotificationGateway(
            webhook_url="http://notificaciones.test/webhook",
            timeout_seconds=2.0,
            breaker=self.breaker,
        )
        self.notificacion = Notificacion(
            tipo="reserva_cancelada",
            destinatario_id="u-propietario",
            titulo="Reserva cancelada",
            mensaje="La reserva JM-TEST0001 de Cancha Los Leones fue cancelada.",
            datos={"reserva_id": "r-1", "motivo": "Tengo un conflicto de horario"},
        )

    def _mock_client(self, mock_client_cls, status_code=200, text="ok"):
        mock_resp = MagicMock()
        mock_resp.status_code = status_code
        mock_resp.text = text

        mock_client = AsyncMock()
        mock_client.__aenter__.return_value = mock_client
        mock_client.post.return_value = mock_resp
        mock_client_cls.return_value = mock_client
        return mock_client

    @patch("httpx.AsyncClient")
    async def test_send_success(self, mock_client_cls):
        mock_client = self._mock_client(mock_client_cls, status_code=202)

        result = await self.gateway.send(self.notificacion)

        self.assertEqual(result.status, "SENT")
        self.assertTrue(result.enviada)
        self.assertEqual(result.http_status, 202)

        # Verify payload
        args, kwargs = mock_client.post.call_args
        self.assertEqual(args[0], "http://notificaciones.test/webhook")
        self.assertEqual(kwargs["json"]["tipo"], "reserva_cancelada")
        self.assertEqual(kwargs["json"]["destinatario_id"], "u-propietario")
        self.assertEqual(kwargs["json"]["datos"]["reserva_id"], "r-1")
        mock_client_cls.assert_called_once_with(timeout=2.0)

    @patch("httpx.AsyncClient")
    async def test_send_client_error(self, mock_client_cls):
        self._mock_client(mock_client_cls, status_code=422, text="destinatario inválido")

        result = await self.gateway.send(self.notificacion)

        self.assertEqual(result.status, "FAILED")
        self.assertEqual(result.error_code, "NON_2XX")
        self.assertEqual(result.http_status, 422)
        # Un 4xx no cuenta como fallo del servicio
        self.assertEqual(self.breaker.fail_counter, 0)

    @patch("httpx.AsyncClient")
    async def test_send_server_error_counts_as_failure(self, mock_client_cls):
        self._mock_client(mock_client_cls, status_code=503, text="mantención")

        result = await self.gateway.send(self.notificacion)

        self.assertEqual(result.status, "FAILED")
        self.assertEqual(result.error_code, "NON_2XX")
        self.assertEqual(result.http_status, 503)
        self.assertEqual(result.error_message, "mantención")
        self.assertEqual(self.breaker.fail_counter, 1)

    @patch("httpx.AsyncClient")
    async def test_send_timeout(self, mock_client_cls):
        mock_client = self._mock_client(mock_client_cls)
        mock_client.post.side_effect = httpx.ReadTimeout("timed out")

        result = await self.gateway.send(self.notificacion)

        self.assertEqual(result.status, "FAILED")
        self.assertEqual(result.error_code, "TIMEOUT")

    @patch("httpx.AsyncClient")
    async def test_send_connection_error(self, mock_client_cls):
        mock_client = self._mock_client(mock_client_cls)
        mock_client.post.side_effect = httpx.ConnectError("connection refused")

        result = await self.gateway.send(self.notificacion)

        self.assertEqual(result.status, "FAILED")
        self.assertEqual(result.error_code, "HTTP_ERROR")

    @patch("httpx.AsyncClient")
    async def test_send_circuit_open(self, mock_client_cls):
        mock_client = self._mock_client(mock_client_cls)
        self.breaker.open()

        result = await self.gateway.send(self.notificacion)

        self.assertEqual(result.status, "FAILED")
        self.assertEqual(result.error_code, "CIRCUIT_OPEN")
        mock_client.post.assert_not_called()
