"""Tests for the command-line interface (offline paths only)."""

import json

import pytest

from prox.cli import main


def test_no_command_prints_help(capsys):
    with pytest.raises(SystemExit):
        main([])
    assert "usage: prox" in capsys.readouterr().out


def test_lookup(capsys):
    main(["lookup", "Honeycrisp Apples", "--category", "Produce"])
    out = capsys.readouterr().out
    assert "shelf life 35 days, restock 21 days" in out


def test_lookup_unknown_category(capsys):
    main(["lookup", "Unknown Gadget", "--category", "Electronics"])
    out = capsys.readouterr().out
    assert "shelf life 30 days" in out
    assert "unknown category" in out


def test_estimate_offline_json(capsys):
    main([
        "estimate", "Kale", "--category", "Produce",
        "--purchased", "2024-01-01", "--offline", "--json",
    ])
    data = json.loads(capsys.readouterr().out)
    assert data == {
        "estimatedExpirationAt": "2024-01-07",
        "estimatedRestockAt": "2024-01-07",
        "source": "heuristic",
    }


def test_batch_offline(capsys, tmp_path):
    path = tmp_path / "items.json"
    path.write_text(json.dumps([
        {"name": "Bananas", "category": "Produce", "purchasedAt": "2024-01-01"},
        {"name": "Unknown Gadget", "category": "Electronics", "purchasedAt": "2024-01-01"},
    ]))
    main(["batch", str(path), "--offline"])
    data = json.loads(capsys.readouterr().out)
    assert [d["estimatedExpirationAt"] for d in data] == ["2024-01-03", "2024-01-31"]
    assert all(d["source"] == "heuristic" for d in data)


def test_expiring(capsys, tmp_path):
    path = tmp_path / "inventory.json"
    path.write_text(json.dumps([
        {"name": "Milk", "category": "Dairy", "purchasedAt": "2024-06-01",
         "estimatedExpirationAt": "2024-06-11", "estimatedRestockAt": "2024-06-08"},
        {"name": "Rice", "category": "Pantry", "purchasedAt": "2024-06-01",
         "estimatedExpirationAt": "2024-12-01", "estimatedRestockAt": "2024-08-01"},
    ]))
    main(["expiring", str(path), "--today", "2024-06-10"])
    out = capsys.readouterr().out
    assert "1 items expiring within 7 days" in out
    assert "Tomorrow" in out
    assert "Rice" not in out.split("due for restock")[0]
    assert "1 items due for restock" in out


def test_batch_accepts_iso_timestamps(capsys, tmp_path):
    path = tmp_path / "items.json"
    path.write_text(json.dumps([
        {"name": "Bananas", "category": "Produce", "purchasedAt": "2024-01-01T10:00:00Z"},
    ]))
    main(["batch", str(path), "--offline"])
    data = json.loads(capsys.readouterr().out)
    assert data[0]["purchasedAt"] == "2024-01-01"
    assert data[0]["estimatedExpirationAt"] == "2024-01-03"


def test_expiring_shows_quantity_and_tolerates_unknown_source(capsys, tmp_path):
    path = tmp_path / "inventory.json"
    path.write_text(json.dumps([
        {"name": "Ground Beef", "category": "Meat", "purchasedAt": "2024-06-09",
         "estimatedExpirationAt": "2024-06-11", "quantity": 2, "unit": "lb",
         "source": "manual"},
    ]))
    main(["expiring", str(path), "--today", "2024-06-10"])
    out = capsys.readouterr().out
    assert "Ground Beef" in out
    assert "2 lb" in out
    assert "Tomorrow" in out
