from unittest.mock import MagicMock

import pytest
import requests

from licensing.web import GatewayClient, GatewayClientError


def _response(status_code=200, body=None):
    resp = MagicMock()
    resp.status_code = status_code
    if body is None:
        resp.json.side_effect = ValueError("no json")
    else:
        resp.json.return_value = body
    return resp


def _client(*responses):
    session = MagicMock(spec=requests.Session)
    session.request.side_effect = list(responses)
    return GatewayClient("http://gw.local/", session=session), session


def test_login_stores_token_and_sends_bearer():
    client, session = _client(
        _response(200, {"access_token": "tok-1", "expires_in": 3600, "token_type": "Bearer"}),
        _response(200, {"success": True, "message": "ok", "data": [{"customer_id": 1, "name": "Acme"}]}),
    )
    token = client.login("alice", "pw")
    assert token["access_token"] == "tok-1"
    assert client.access_token == "tok-1"

    customers = client.list("customers")
    assert customers == [{"customer_id": 1, "name": "Acme"}]

    method, url = session.request.call_args_list[1].args
    assert (method, url) == ("GET", "http://gw.local/api/customers")
    assert session.request.call_args_list[1].kwargs["headers"]["Authorization"] == "Bearer tok-1"
    first = session.request.call_args_list[0]
    assert first.args == ("POST", "http://gw.local/api/auth/login")
    assert first.kwargs["json"] == {"username": "alice", "password": "pw"}
    assert "Authorization" not in first.kwargs["headers"]


def test_error_envelope_raises_with_server_message():
    client, _ = _client(_response(400, {
        "success": False,
        "message": "Only completed payments can be refunded",
        "errors": [],
    }))
    with pytest.raises(GatewayClientError) as exc:
        client.refund_payment(5, "duplicate charge")
    assert exc.value.message == "Only completed payments can be refunded"
    assert exc.value.status_code == 400


def test_gateway_message_body_and_non_json_errors():
    client, _ = _client(
        _response(401, {"message": "Unauthorized: Token required"}),
        _response(502, None),
    )
    with pytest.raises(GatewayClientError) as exc:
        client.payment_summary()
    assert exc.value.message == "Unauthorized: Token required"
    with pytest.raises(GatewayClientError) as exc:
        client.get("licenses", 1)
    assert exc.value.status_code == 502
    assert "502" in exc.value.message


def test_payment_helpers_paths_and_payloads():
    ok = {"success": True, "message": "", "data": {"payment_id": 3, "status": "Completed"}}
    client, session = _client(_response(201, ok), _response(200, ok), _response(200, ok), _response(204))
    client.access_token = "t"
    client.create_payment({"license_id": 1, "amount": "10.00", "payment_method": "Card"})
    client.update_payment_status(3, "Completed")
    client.refund_payment(3)
    assert client.delete("payments", 3) is None

    calls = [(c.args[0], c.args[1]) for c in session.request.call_args_list]
    assert calls == [
        ("POST", "http://gw.local/api/payments"),
        ("PUT", "http://gw.local/api/payments/3/status"),
        ("PUT", "http://gw.local/api/payments/3/refund"),
        ("DELETE", "http://gw.local/api/payments/3"),
    ]
    assert session.request.call_args_list[1].kwargs["json"] == {"status": "Completed"}
    assert session.request.call_args_list[2].kwargs["json"] == {"reason": None}


def test_connection_errors_are_wrapped():
    session = MagicMock(spec=requests.Session)
    session.request.side_effect = requests.ConnectionError("refused")
    client = GatewayClient("http://gw.local", session=session)
    with pytest.raises(GatewayClientError) as exc:
        client.list("tenants")
    assert "Could not reach gateway" in exc.value.message


def test_unknown_resource_and_refresh_without_login():
    client = GatewayClient("http://gw.local", session=MagicMock(spec=requests.Session))
    with pytest.raises(ValueError):
        client.list("widgets")
    with pytest.raises(GatewayClientError):
        client.refresh()


def test_path_segments_are_percent_encoded():
    ok = {"success": True, "message": "", "data": {}}
    client, session = _client(_response(200, ok), _response(200, ok), _response(200, ok))
    client.get_user_by_username("a/b?c")
    client.payments_by_status("Pending?x=1")
    client.payment_by_reference("A?B")
    urls = [c.args[1] for c in session.request.call_args_list]
    assert urls == [
        "http://gw.local/api/usersauth/a%2Fb%3Fc",
        "http://gw.local/api/payments/status/Pending%3Fx%3D1",
        "http://gw.local/api/payments/reference/A%3FB",
    ]
