"""
End-to-end tests for Storefront CLI commands.

These tests run the actual CLI against real files, without mocking.
They verify the full pipeline from CLI invocation to final output.
"""

import json
import os
import sys
from dataclasses import dataclass
from io import StringIO
from pathlib import Path

import pytest
from storefront.cli.main import main as storefront_main


@dataclass
class CLIResult:
    """Result of running the CLI."""

    returncode: int
    stdout: str
    stderr: str


def run_storefront(*args: str, cwd: Path | None = None, stdin: str = "") -> CLIResult:
    """Run storefront CLI command and return the result."""
    original_cwd = os.getcwd()
    original_stdin = sys.stdin
    original_stdout = sys.stdout
    original_stderr = sys.stderr

    stdout_capture = StringIO()
    stderr_capture = StringIO()

    try:
        if cwd:
            os.chdir(cwd)

        sys.stdin = StringIO(stdin)
        sys.stdout = stdout_capture
        sys.stderr = stderr_capture

        try:
            returncode = storefront_main(list(args))
        except SystemExit as e:
            returncode = e.code if e.code is not None else 0

    finally:
        os.chdir(original_cwd)
        sys.stdin = original_stdin
        sys.stdout = original_stdout
        sys.stderr = original_stderr

    return CLIResult(
        returncode=returncode,
        stdout=stdout_capture.getvalue(),
        stderr=stderr_capture.getvalue(),
    )


ORDERS_YAML = """
orders:
  - number: 201
    description: Birthday
    delivery:
      kind: home
      address: 1 Lenin St
      phone: "+79000000001"
      courier_service: CDEK Courier
      time_slot: "10:00 - 12:00"
    products:
      - {name: Headphones, price: 7000}
      - {name: Cable, price: 500}
  - number: 202
    description: Refill
    delivery:
      kind: pickpoint
      address: Mega mall
      phone: "+79000000002"
      company: Ozon
      point_id: OZ-77
    products:
      - {name: Ink, price: 1200}
      - {name: Ink, price: 1200}
"""


@pytest.fixture
def shop_repo(tmp_path: Path) -> Path:
    repo = tmp_path / "shop"
    repo.mkdir()
    (repo / "orders.yaml").write_text(ORDERS_YAML, encoding="utf-8")
    return repo


def test_show_full_text_output(shop_repo: Path):
    result = run_storefront("orders", "show", "--today", "2026-02-27", cwd=shop_repo)

    assert result.returncode == 0, result.stderr
    sep = "=" * 40
    assert result.stdout == (
        f"{sep}\n"
        "Order #201: Birthday\n"
        "Products:\n"
        " - Headphones (7 000.00 ₽)\n"
        " - Cable (500.00 ₽)\n"
        "Subtotal: 7 500.00 ₽\n"
        "Shipping: 500.00 ₽ (Total: 8 000.00 ₽)\n"
        "Delivery date: 02.03.2026\n"
        "Delivery details: Courier service 'CDEK Courier'. Await courier at: 1 Lenin St. "
        "Time: 10:00 - 12:00. Phone: +79000000001\n"
        f"{sep}\n"
        "\n"
        f"{sep}\n"
        "Order #202: Refill\n"
        "Products:\n"
        " - Ink (1 200.00 ₽)\n"
        " - Ink (1 200.00 ₽)\n"
        "Subtotal: 2 400.00 ₽\n"
        "Shipping: 150.00 ₽ (Total: 2 550.00 ₽)\n"
        "Delivery date: 02.03.2026\n"
        "Delivery details: Pickup point 'Ozon' (ID: OZ-77). Address: Mega mall. Storage: 5 days.\n"
        f"{sep}\n"
    )


def test_show_json_then_validate(shop_repo: Path):
    shown = run_storefront("orders", "show", "--format", "json", "--today", "2026-02-27", cwd=shop_repo)
    data = json.loads(shown.stdout)
    assert [o["shipping_cost"] for o in data["orders"]] == ["500", "150"]

    checked = run_storefront("orders", "validate", cwd=shop_repo)
    assert checked.returncode == 1
    assert "duplicate_product [order 202]" in checked.stdout

    strict = run_storefront("orders", "show", "--strict", cwd=shop_repo)
    assert strict.returncode == 1
    assert strict.stdout == ""


def test_explicit_orders_and_config_files(tmp_path: Path, shop_repo: Path):
    config = tmp_path / "settings.json"
    config.write_text(json.dumps({"settings": {"currency": "RUB", "today": "2026-02-27"}}), encoding="utf-8")

    result = run_storefront(
        "--config",
        str(config),
        "orders",
        "show",
        "-q",
        "--orders",
        str(shop_repo / "orders.yaml"),
        cwd=tmp_path,
    )

    assert result.returncode == 0, result.stderr
    assert result.stdout.splitlines() == [
        "#201 Birthday: 8 000.00 RUB (shipping 500.00 RUB), arrives 02.03.2026",
        "#202 Refill: 2 550.00 RUB (shipping 150.00 RUB), arrives 02.03.2026",
    ]


def test_broken_orders_file(tmp_path: Path):
    (tmp_path / "orders.yaml").write_text("orders:\n  - number: 1\n    delivery: {kind: drone}\n", encoding="utf-8")
    result = run_storefront("orders", "show", cwd=tmp_path)

    assert result.returncode == 2
    assert "unknown_delivery_kind" in result.stderr


def test_profile_questionnaire(tmp_path: Path):
    answers = "\n".join(["Olga", "Ivanova", "-1", "29", "Да", "1", "Murka", "2", "green", "white"]) + "\n"
    result = run_storefront("profile", cwd=tmp_path, stdin=answers)

    assert result.returncode == 0
    assert "Invalid input! Enter a whole number greater than 0." in result.stdout
    assert "Name: Olga" in result.stdout
    assert "Age: 29" in result.stdout
    assert "Pets:\n - Murka" in result.stdout
    assert "Favorite colors:\n - green\n - white\n" in result.stdout


def test_debug_logging_goes_to_stderr(shop_repo: Path):
    result = run_storefront("--log-level", "debug", "orders", "show", "-q", "--today", "2026-02-27", cwd=shop_repo)

    assert result.returncode == 0
    assert "loading orders from" in result.stderr
    assert "loaded 2 orders" in result.stderr
    assert "loading orders" not in result.stdout
