"""
Copyright (c) 2019, Brian Stafford
Copyright (c) 2019-2020, The tinyecc developers
See LICENSE for details
"""

import json
import logging
from logging import Logger
from logging.handlers import RotatingFileHandler
import os
from pathlib import Path
import sys
import traceback
from typing import Any, Dict, List, Optional, Union

from appdirs import AppDirs  # type: ignore


def formatTraceback(err: Exception) -> str:
    """
    Format a traceback for an error so that it can go into logs.

    Args:
        err: The error the traceback is extracted from.

    Returns:
        The __str__() of the error, followed by the standard formatting
            of the traceback on the following lines.
    """
    return "".join(traceback.format_exception(None, err, err.__traceback__))


def mkdir(path: Union[Path, str]) -> bool:
    """
    Create the directory if it doesn't exist. Uses os.path .

    Args:
        path: the directory path.
    """
    if os.path.isdir(path):
        return True
    if os.path.isfile(path):
        return False
    os.makedirs(path)
    return True


class LogSettings:
    """
    The levels handed out by getLogger, and the handlers installed by
    prepareLogging.
    """

    root = logging.getLogger("")
    defaultLevel = logging.INFO
    moduleLevels: Dict[str, int] = {}
    loggers: Dict[str, Logger] = {}
    handlers: List[logging.Handler] = []


LogSettings.root.setLevel(logging.NOTSET)


def prepareLogging(
    filepath: Union[Path, str, None] = None,
    logLvl: int = logging.INFO,
    lvlMap: Optional[Dict[str, int]] = None,
) -> None:
    """
    Prepare for using getLogger. Logs to stdout, and to a rotating log file if
    filepath is provided. Handlers from an earlier call are closed and
    replaced, so calling prepareLogging again only changes the destinations
    and levels. Loggers already handed out by getLogger get their levels
    reset from the new logLvl and lvlMap.

    Args:
        filepath: The base name for the rotating log file.
        logLvl: The default logging level used for all loggers without
            entries in the lvlMap.
        lvlMap: The name->level mapping will be added to the stored level dict,
            which is referenced when loggers are created using getLogger.
    """
    LogSettings.defaultLevel = logLvl
    LogSettings.moduleLevels.update(lvlMap if lvlMap else {})
    for name, logger in LogSettings.loggers.items():
        logger.setLevel(LogSettings.moduleLevels.get(name, logLvl))

    for handler in LogSettings.handlers:
        LogSettings.root.removeHandler(handler)
        handler.close()
    LogSettings.handlers = [logging.StreamHandler(sys.stdout)]
    if filepath:
        LogSettings.handlers.append(
            RotatingFileHandler(filepath, maxBytes=5 * 1024 * 1024, backupCount=2)
        )

    formatter = logging.Formatter(
        "%(asctime)s %(name)s %(levelname)s %(funcName)s(%(lineno)d) %(message)s"
    )
    for handler in LogSettings.handlers:
        handler.setFormatter(formatter)
        LogSettings.root.addHandler(handler)


def getLogger(name: str) -> Logger:
    """
    Gets a named logger. If the name has a log level registered with
    prepareLogging, that level will be used, otherwise the default is used.

    Args:
        name: The logger name.
    """
    l = LogSettings.root.getChild(name)
    l.setLevel(LogSettings.moduleLevels.get(name, LogSettings.defaultLevel))
    LogSettings.loggers[name] = l
    return l


def appDataDir(appName: str) -> str:
    """
    appDataDir returns an operating system specific directory to be used for
    storing application data for an application.

    Args:
        appName: The name of the app whose data directory is wanted.

    Returns:
        The path of the wanted data directory.
    """
    if appName == "" or appName == ".":
        return "."
    # A leading period would hide the directory on some platforms, and
    # AppDirs adds its own conventions anyway.
    appName = appName.lstrip(".")
    return AppDirs(appName.lower(), False).user_data_dir


def loadJSON(path: Union[Path, str]) -> Any:
    """
    Read and decode a JSON file.

    Args:
        path: The file path.

    Returns:
        The decoded JSON value.
    """
    with open(path, "r") as f:
        return json.load(f)


def saveJSON(path: Union[Path, str], thing: Any, **kwargs: Any) -> None:
    """
    Encode and write a JSON file. Extra keyword arguments are passed to
    json.dump.

    Args:
        path: The file path.
        thing: The JSON-encodable value.
    """
    with open(path, "w") as f:
        json.dump(thing, f, **kwargs)
