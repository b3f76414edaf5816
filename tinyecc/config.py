"""
Copyright (c) 2019, Brian Stafford
Copyright (c) 2019-2020, the tinyecc developers
See LICENSE for details

Configuration settings for tinyecc.

The configuration file is JSON formatted, e.g.

  {
    "logLevel": "info",
    "logLevels": {"ECC": "debug"},
    "curveTables": ["/path/to/curves.json"]
  }

A missing file is the same as an empty one.
"""

import logging
import os

from tinyecc import EccError, instances
from tinyecc.util import helpers


APP_NAME = "tinyecc"

# The master configuration file name.
CONFIG_NAME = "tinyecc.conf"

# The environment variable that overrides the configuration file path.
CONFIG_ENV = "TINYECC_CONFIG"

log = helpers.getLogger("CONFIG")

logLevelMap = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "notset": logging.NOTSET,
    "0": logging.NOTSET,
}


def logLvl(s):
    """
    Get the log level from the map.

    Args:
        s (str or int): A string which is a key for the logLevelMap.
            Case-insensitive. Integers are returned unchanged.
    """
    if isinstance(s, int):
        return s
    try:
        return logLevelMap[s.lower()]
    except (AttributeError, KeyError):
        raise EccError(f"unknown log level {s!r}")


def parseLogLevels(spec):
    """
    Parse a log level specifier. The specifier is either a single level, e.g.
    "debug", or comma-separated name:level pairs, e.g. "ECC:debug,CONFIG:0".

    Args:
        spec (str): The specifier.

    Returns:
        int or None: The default level, if the specifier sets one.
        dict: The per-logger levels.
    """
    if any(ch in spec for ch in (",", ":")):
        try:
            pairs = (s.split(":") for s in spec.split(","))
            return None, {k: logLvl(v) for k, v in pairs}
        except ValueError:
            raise EccError(f"malformed loglevel specifier: {spec}")
    return logLvl(spec), {}


def defaultConfigPath():
    """
    The configuration file path. The TINYECC_CONFIG environment variable
    takes precedence over the application data directory.

    Returns:
        str: The file path.
    """
    envPath = os.environ.get(CONFIG_ENV)
    if envPath:
        return envPath
    return os.path.join(helpers.appDataDir(APP_NAME), CONFIG_NAME)


class EccConfig:
    """
    EccConfig is configuration settings. The configuration file is JSON
    formatted.
    """

    def __init__(self, path=None):
        """
        Args:
            path (str): optional. The configuration file path. Defaults to
                defaultConfigPath().
        """
        self.path = path if path else defaultConfigPath()
        self.file = {}
        if os.path.isfile(self.path):
            self.file = helpers.loadJSON(self.path)
            if not isinstance(self.file, dict):
                raise EccError(f"configuration file {self.path} is not a JSON object")
        self.normalize()

    def set(self, k, v):
        """
        Set the configuration option. The configuration is not saved, so `save`
        should be called separately.

        Args:
            k (str): The setting key.
            v (JSON-encodable): The value.
        """
        self.file[k] = v

    def get(self, *keys):
        """
        Retrieve the setting at the provided key path. Multiple keys can be
        provided, with each successive key being retrieved from the previous
        key's value.

        Args:
            *keys (str): Recursive key list.

        Returns:
            mixed: The configuration value.
        """
        d = self.file
        rVal = None
        for k in keys:
            if not isinstance(d, dict) or k not in d:
                return None
            rVal = d[k]
            d = rVal
        return rVal

    def normalize(self):
        """
        Perform attribute checks and initialization.
        """
        file = self.file
        file.setdefault("logLevel", "info")
        file.setdefault("logLevels", {})
        file.setdefault("curveTables", [])

    def logLevels(self):
        """
        The logging levels. The "logLevel" setting may be a full specifier, as
        accepted by parseLogLevels. Entries in "logLevels" take precedence over
        the per-logger levels of the specifier.

        Returns:
            int: The default level.
            dict: The per-logger levels.
        """
        lvl = self.file["logLevel"]
        if isinstance(lvl, str):
            default, moduleLevels = parseLogLevels(lvl)
        else:
            default, moduleLevels = logLvl(lvl), {}
        moduleLevels.update({k: logLvl(v) for k, v in self.file["logLevels"].items()})
        return logging.INFO if default is None else default, moduleLevels

    def save(self):
        """
        Save the file.
        """
        helpers.mkdir(os.path.dirname(self.path) or ".")
        helpers.saveJSON(self.path, self.file, indent=4, sort_keys=True)

    def apply(self, logFilePath=None):
        """
        Set up logging from the log levels and register the curve tables
        listed in the configuration.

        Args:
            logFilePath (str): optional. A rotating log file to write to.

        Returns:
            list(CurveID): The curves registered from the tables.
        """
        logLevel, moduleLevels = self.logLevels()
        helpers.prepareLogging(logFilePath, logLvl=logLevel, lvlMap=moduleLevels)
        curveIDs = []
        for tablePath in self.file["curveTables"]:
            log.debug(f"loading curve tables from {tablePath}")
            try:
                curveIDs.extend(instances.loadParamsFile(tablePath))
            except (OSError, ValueError, EccError) as e:
                log.error(f"unable to load curve tables: {helpers.formatTraceback(e)}")
                raise
        return curveIDs


eccConfig = None


def load(path=None):
    """
    Load and return the current configuration.

    The configuration is only loaded once. Successive calls to the modular `load`
    function will return the same instance.

    Returns:
        EccConfig: The current configuration.
    """
    global eccConfig
    if not eccConfig:
        eccConfig = EccConfig(path)
    return eccConfig
