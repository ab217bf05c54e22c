"""

Code that is reusable over multiple team commands: reading the toml config
and connecting to the Hudson home.

    [HOST]
    home = "/var/lib/hudson"
    user = "admin"

    [COPY]
    email = "team@example.com"
    nodes = "visible"
    views = "ignore"

"""

from TeamCopy.hudsonHome import HudsonHome
from TeamCopy.teamManager import TeamError, TeamManager
from typing import Optional
import pprint

try:
    import tomllib  # Python v3.11
except ModuleNotFoundError:
    import tomli as tomllib  # < Python v3.11

allowed_copy_keys = ("email", "nodes", "views")
allowed_policies = ("move", "visible", "ignore")


class ConfigError(Exception):
    pass


class BaseApp:
    def __init__(
        self,
        *,
        act: bool = False,
        conf_fn: str,
        host: Optional[TeamManager] = None,
    ) -> None:
        self.act = act
        conf = self._init_conf(conf_fn=conf_fn)
        self.conf = self._parse_conf(conf)
        pprint.pprint(self.conf)
        if host is None:
            try:
                host = HudsonHome(
                    home=self.conf["HOST"]["home"], user=self.conf["HOST"]["user"]
                )
            except TeamError as e:
                raise ConfigError(f"ERROR: {e}") from e
        self.host = host
        print(f"Working as {self.conf['HOST']['user']}")

    def default(self, key: str):
        """Returns a value from the optional COPY section or None."""
        return self.conf["COPY"].get(key)

    #
    # private
    #

    def _init_conf(self, *, conf_fn: str) -> dict:
        try:
            with open(conf_fn, "rb") as f:
                return tomllib.load(f)
        except FileNotFoundError:
            raise ConfigError(f"ERROR: Config file '{conf_fn}' not found")
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"ERROR: Config file '{conf_fn}' invalid: {e}")

    def _parse_conf(self, conf: dict) -> dict:
        """
        Copies only the sections we know. HOST is required and needs home and
        user; COPY is optional and may only contain defaults for the command
        line arguments.
        """
        new_conf = {}

        try:
            conf["HOST"]
        except KeyError:
            raise ConfigError("Required config section 'HOST' missing")
        else:
            new_conf["HOST"] = dict(conf["HOST"])

        for key in ("home", "user"):
            try:
                new_conf["HOST"][key]
            except KeyError:
                raise ConfigError(f"ERROR: HOST needs {key}")
            if not isinstance(new_conf["HOST"][key], str):
                raise ConfigError(f"ERROR: HOST {key} must be a string")

        new_conf["COPY"] = dict(conf.get("COPY", {}))
        for key in new_conf["COPY"]:
            if key not in allowed_copy_keys:
                raise ConfigError(f"ERROR: Unknown key in COPY: '{key}'")
            if not isinstance(new_conf["COPY"][key], str):
                raise ConfigError(f"ERROR: COPY {key} must be a string")
        for key in ("nodes", "views"):
            value = new_conf["COPY"].get(key)
            if value is not None and value.lower() not in allowed_policies:
                raise ConfigError(
                    f"ERROR: {key} must be one of move, visible or ignore"
                )
        print("Config file valid")
        return new_conf
