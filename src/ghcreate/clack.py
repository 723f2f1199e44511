from __future__ import annotations
from typing import Any
import click


class ConfigurableCommand(click.Command):
    """
    A command whose option defaults can be set via the ``[options]`` table of
    the configuration file
    """

    def __init__(
        self,
        allow_config: list[str] | None = None,
        disallow_config: list[str] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.allow_config = allow_config
        self.disallow_config = disallow_config

    def is_configurable(self, paramname: str) -> bool:
        return (self.allow_config is None or paramname in self.allow_config) and (
            self.disallow_config is None or paramname not in self.disallow_config
        )

    def process_config(self, cfg: dict[str, Any]) -> dict[str, Any]:
        out_cfg: dict[str, Any] = {}
        params = {p.name: p for p in self.params if p.name is not None}
        for k, v in cfg.items():
            k = k.replace("-", "_")
            if (p := params.get(k)) is None or not self.is_configurable(k):
                continue
            if isinstance(p, click.Option) and p.is_flag and isinstance(v, bool):
                out_cfg[k] = v
            else:
                out_cfg[k] = str(v)
        return out_cfg


class ConfigurableGroup(ConfigurableCommand, click.Group):
    def process_config(self, cfg: dict[str, Any]) -> dict[str, Any]:
        out_cfg = super().process_config(cfg)
        for cmdname, cmdobj in self.commands.items():
            if isinstance(cmdobj, ConfigurableCommand) and isinstance(
                c := cfg.get(cmdname), dict
            ):
                out_cfg[cmdname] = cmdobj.process_config(c)
        return out_cfg
