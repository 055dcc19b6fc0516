from datetime import datetime, timedelta

from flask import Flask

from app.utils import err, json_body, now_utc, ok


def test_ok_and_err_responses():
    app = Flask(__name__)
    with app.app_context():
        ok_response, ok_status = ok({"value": 1}, status=201)
        err_response, err_status = err("bad", status=400)

    assert ok_status == 201
    assert ok_response.get_json() == {"ok": True, "value": 1}
    assert err_status == 400
    assert err_response.get_json() == {"ok": False, "error": "bad"}


def test_json_body_ignores_non_objects():
    app = Flask(__name__)
    with app.test_request_context("/", method="POST", json=[1, 2]):
        assert json_body() == {}
    with app.test_request_context("/", method="POST", data="not json"):
        assert json_body() == {}
    with app.test_request_context("/", method="POST", json={"a": 1}):
        assert json_body() == {"a": 1}


def test_now_utc_is_recent():
    before = datetime.utcnow() - timedelta(seconds=1)
    value = now_utc()
    after = datetime.utcnow() + timedelta(seconds=1)
    assert before <= value <= after
