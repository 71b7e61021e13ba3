import importlib.util
import json
import sys
from decimal import Decimal
from pathlib import Path

SCRIPTS = Path(__file__).resolve().parents[2] / "scripts"


def _load(name):
    spec = importlib.util.spec_from_file_location(name, SCRIPTS / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    sys.modules[name] = module
    spec.loader.exec_module(module)
    return module


def test_payment_report_formats():
    report_mod = _load("payment_report")
    report = report_mod.PaymentReport(by_status={
        "Completed": (2, Decimal("150")),
        "Pending": (1, Decimal("25.5")),
        "Legacy": (1, Decimal("1")),
    })
    data = json.loads(report.to_json())
    assert data["total_payments"] == 4
    assert data["total_amount"] == "150.00"
    assert data["by_status"]["Pending"] == {"count": 1, "amount": "25.50"}
    assert data["unknown_statuses"] == ["Legacy"]

    text = report.pretty()
    assert "Completed amount: 150.00" in text
    assert "unexpected statuses present: Legacy" in text


def test_create_user_script_seeds_account(db_session, capsys):
    create_user = _load("create_user")
    rc = create_user.main(["--username", "seed", "--email", "seed@example.com", "--password", "pw", "--role", "Admin"])
    assert rc == 0
    assert "Created user seed" in capsys.readouterr().out

    from licensing.services import UserService
    assert UserService(db_session).authenticate("seed", "pw").role == "Admin"

    rc = create_user.main(["--username", "seed", "--email", "x@example.com", "--password", "pw"])
    assert rc == 1
    assert "Username already exists" in capsys.readouterr().err
