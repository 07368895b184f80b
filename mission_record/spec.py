"""
Recording specification: what to record for one mission and where it goes.

A RecordingSpec is pure data. The archiving core only looks at
`is_recording`, `working_dir`, `destination` and `codec`; the artifact flags
and paths are read by whatever writes video and logs into the working
directory while the mission runs.
"""

from __future__ import annotations

import uuid
from pathlib import Path
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .config import get_config

Codec = Literal["gzip", "zstd"]

# Default artifact file names inside the working directory
MP4_NAME = "video.mp4"
OBSERVATIONS_NAME = "observations.txt"
REWARDS_NAME = "rewards.txt"
COMMANDS_NAME = "commands.txt"
MISSION_INIT_NAME = "missionInit.xml"


class RecordingSpec(BaseModel):
    """
    Immutable description of one mission recording.

    The default instance is the inert spec: recording disabled, nothing on
    disk is ever touched for it.
    """

    model_config = ConfigDict(frozen=True)

    # === Master switch ===
    is_recording: bool = Field(
        default=False,
        description="When False every other field is ignored by the session.",
    )

    # === Locations ===
    working_dir: Optional[Path] = Field(
        default=None,
        description="Temporary directory collecting artifacts during the mission.",
    )
    destination: Optional[Path] = Field(
        default=None,
        description="Where the compressed archive is written on close.",
    )
    codec: Codec = Field(
        default="gzip",
        description="Compression filter applied to the tar container.",
    )

    # === Video ===
    is_recording_mp4: bool = False
    mp4_path: Optional[Path] = None
    mp4_bit_rate: int = Field(default=0, ge=0, description="Bits per second.")
    mp4_fps: int = Field(default=0, ge=0)

    # === Logs ===
    is_recording_observations: bool = False
    observations_path: Optional[Path] = None
    is_recording_rewards: bool = False
    rewards_path: Optional[Path] = None
    is_recording_commands: bool = False
    commands_path: Optional[Path] = None

    mission_init_path: Optional[Path] = None

    @model_validator(mode="after")
    def _require_locations(self) -> "RecordingSpec":
        if self.is_recording and (self.working_dir is None or self.destination is None):
            raise ValueError("a recording spec needs both working_dir and destination")
        return self

    # --- construction helpers ---

    @classmethod
    def for_destination(
        cls,
        destination: str | Path,
        *,
        temp_root: str | Path | None = None,
        codec: Optional[Codec] = None,
    ) -> "RecordingSpec":
        """
        Build a recording spec with a fresh, uniquely named working directory.

        The directory is ``<temp_root>/mission_records/<uuid>``; nothing is
        created on disk until a session is opened with the spec.
        """
        cfg = get_config()
        root = Path(temp_root or cfg.TEMP_ROOT)
        working_dir = root / "mission_records" / uuid.uuid4().hex
        return cls(
            is_recording=True,
            working_dir=working_dir,
            destination=Path(destination),
            codec=codec or cfg.CODEC,
            mp4_path=working_dir / MP4_NAME,
            observations_path=working_dir / OBSERVATIONS_NAME,
            rewards_path=working_dir / REWARDS_NAME,
            commands_path=working_dir / COMMANDS_NAME,
            mission_init_path=working_dir / MISSION_INIT_NAME,
        )

    def _replace(self, **changes: Any) -> "RecordingSpec":
        # Rebuild through the constructor so changes are validated.
        return type(self)(**{**self.model_dump(), **changes})

    def with_mp4(self, frames_per_second: int, bit_rate: int) -> "RecordingSpec":
        return self._replace(
            is_recording_mp4=True, mp4_fps=frames_per_second, mp4_bit_rate=bit_rate
        )

    def with_observations(self) -> "RecordingSpec":
        return self._replace(is_recording_observations=True)

    def with_rewards(self) -> "RecordingSpec":
        return self._replace(is_recording_rewards=True)

    def with_commands(self) -> "RecordingSpec":
        return self._replace(is_recording_commands=True)

    def with_codec(self, codec: Codec) -> "RecordingSpec":
        return self._replace(codec=codec)

    # --- queries ---

    def artifact_paths(self) -> Dict[str, Path]:
        """Paths of the enabled artifacts, keyed by artifact name."""
        paths: Dict[str, Optional[Path]] = {"mission_init": self.mission_init_path}
        if self.is_recording_mp4:
            paths["mp4"] = self.mp4_path
        if self.is_recording_observations:
            paths["observations"] = self.observations_path
        if self.is_recording_rewards:
            paths["rewards"] = self.rewards_path
        if self.is_recording_commands:
            paths["commands"] = self.commands_path
        return {name: p for name, p in paths.items() if p is not None}
