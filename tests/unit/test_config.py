"""
Copyright (c) 2020, the tinyecc developers
See LICENSE for details
"""

import json
import logging
import os

import pytest

from tinyecc import CurveParamsError, EccError, config, instances
from tinyecc.util import helpers


def test_logLvl():
    assert config.logLvl("DEBUG") == logging.DEBUG
    assert config.logLvl("warning") == logging.WARNING
    assert config.logLvl("0") == logging.NOTSET
    assert config.logLvl(15) == 15
    with pytest.raises(EccError):
        config.logLvl("loud")
    with pytest.raises(EccError):
        config.logLvl(None)


def test_parseLogLevels():
    assert config.parseLogLevels("debug") == (logging.DEBUG, {})
    default, levels = config.parseLogLevels("A:Warning,B:deBug,C:Critical,D:0")
    assert default is None
    assert len(levels) == 4
    assert levels["A"] == logging.WARNING
    assert levels["B"] == logging.DEBUG
    assert levels["C"] == logging.CRITICAL
    assert levels["D"] == logging.NOTSET
    with pytest.raises(EccError):
        config.parseLogLevels(",:")
    with pytest.raises(EccError):
        config.parseLogLevels("A:B:C")


def test_defaultConfigPath(monkeypatch):
    monkeypatch.delenv(config.CONFIG_ENV, raising=False)
    assert config.defaultConfigPath() == os.path.join(
        helpers.appDataDir("tinyecc"), "tinyecc.conf"
    )
    monkeypatch.setenv(config.CONFIG_ENV, "/some/where.conf")
    assert config.defaultConfigPath() == "/some/where.conf"


def test_EccConfig(tmp_path):
    path = tmp_path / "sub" / "tinyecc.conf"
    cfg = config.EccConfig(str(path))
    # Missing file, defaults.
    assert cfg.get("logLevel") == "info"
    assert cfg.get("logLevels") == {}
    assert cfg.get("curveTables") == []
    assert cfg.get("nope") is None
    assert cfg.get("logLevel", "deeper") is None
    assert cfg.logLevels() == (logging.INFO, {})

    cfg.set("logLevels", {"ECC": "debug"})
    cfg.set("logLevel", "warning")
    assert cfg.get("logLevels", "ECC") == "debug"
    assert cfg.logLevels() == (logging.WARNING, {"ECC": logging.DEBUG})
    cfg.save()
    assert path.is_file()

    cfg2 = config.EccConfig(str(path))
    assert cfg2.get("logLevels", "ECC") == "debug"

    cfg2.set("logLevel", "ECC:error,CONFIG:debug")
    assert cfg2.logLevels() == (
        logging.INFO,
        {"ECC": logging.DEBUG, "CONFIG": logging.DEBUG},
    )

    path.write_text("[]")
    with pytest.raises(EccError):
        config.EccConfig(str(path))


def test_envOverride(tmp_path, monkeypatch):
    path = tmp_path / "env.conf"
    path.write_text(json.dumps({"logLevel": "debug"}))
    monkeypatch.setenv(config.CONFIG_ENV, str(path))
    assert config.EccConfig().path == str(path)
    assert config.EccConfig().logLevels()[0] == logging.DEBUG


def test_apply(tmp_path, monkeypatch):
    tables = tmp_path / "curves.json"
    tables.write_text(
        json.dumps(
            [
                {
                    "model": "weierstrass",
                    "name": "cfgtoy",
                    "p": "97",
                    "a": "2",
                    "b": "3",
                    "r": "5",
                    "h": "20",
                    "gx": "3",
                    "gy": "6",
                }
            ]
        )
    )
    path = tmp_path / "tinyecc.conf"
    path.write_text(
        json.dumps({"logLevels": {"ECC": "debug"}, "curveTables": [str(tables)]})
    )
    saved = dict(instances.the_curves)
    try:
        cfg = config.EccConfig(str(path))
        curveIDs = cfg.apply(logFilePath=str(tmp_path / "tinyecc.log"))
        assert [c.name for c in curveIDs] == ["cfgtoy"]
        assert instances.getCurve("cfgtoy").getOrder() == 5
        assert helpers.getLogger("ECC").getEffectiveLevel() == logging.DEBUG
    finally:
        instances.the_curves.clear()
        instances.the_curves.update(saved)
        helpers.prepareLogging(lvlMap={"ECC": logging.INFO})


def test_load(monkeypatch, tmp_path):
    monkeypatch.setattr(config, "eccConfig", None)
    cfg = config.load(str(tmp_path / "tinyecc.conf"))
    assert isinstance(cfg, config.EccConfig)
    assert config.load() is cfg


def test_apply_badTable(tmp_path, caplog):
    tables = tmp_path / "curves.json"
    tables.write_text(json.dumps([{"model": "hyperelliptic", "name": "bad"}]))
    path = tmp_path / "tinyecc.conf"
    path.write_text(json.dumps({"curveTables": [str(tables)]}))
    cfg = config.EccConfig(str(path))
    caplog.set_level(logging.ERROR, logger="CONFIG")
    try:
        with pytest.raises(CurveParamsError):
            cfg.apply()
    finally:
        helpers.prepareLogging()
    assert "unable to load curve tables" in caplog.text
    assert "hyperelliptic" in caplog.text
