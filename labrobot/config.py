"""Configuration for running a robot outside a webhook server.

Usage
-----
Create a configuration with defaults:

>>> config = DispatchConfig()
>>> config.log_level
'INFO'

Or load from environment variables:

>>> import os
>>> os.environ["LABROBOT_ROBOT"] = "mybot.robot:Robot"
>>> DispatchConfig.from_env().robot
'mybot.robot:Robot'

"""

from __future__ import annotations

import dataclasses as dc
import os

ENV_LOG_LEVEL = "LABROBOT_LOG_LEVEL"
ENV_ROBOT = "LABROBOT_ROBOT"


@dc.dataclass(frozen=True, slots=True)
class DispatchConfig:
    """Settings for the replay CLI and logging set-up.

    Attributes
    ----------
    log_level
        Raw femtologging level name. Normalised when logging is configured;
        unknown names fall back to ``INFO``.
    robot
        Optional ``module:attribute`` import path of the robot to load.

    """

    log_level: str = "INFO"
    robot: str | None = None

    @classmethod
    def from_env(cls) -> DispatchConfig:
        """Create configuration from environment variables.

        Reads ``LABROBOT_LOG_LEVEL`` (default ``INFO``) and
        ``LABROBOT_ROBOT`` (unset by default). Blank values count as unset.

        Raises
        ------
        ValueError
            If ``LABROBOT_ROBOT`` is set but not shaped ``module:attribute``.

        """
        log_level = os.environ.get(ENV_LOG_LEVEL, "").strip() or "INFO"

        robot: str | None = None
        raw_robot = os.environ.get(ENV_ROBOT, "").strip()
        if raw_robot:
            module, sep, attribute = raw_robot.partition(":")
            if not (module and sep and attribute):
                msg = f"{ENV_ROBOT} must be 'module:attribute', got: {raw_robot!r}"
                raise ValueError(msg)
            robot = raw_robot

        return cls(log_level=log_level, robot=robot)
