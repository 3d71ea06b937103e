"""Side files for the display: numeric temperature and concatenated condition audio."""
import logging
import os
import shutil
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from weather_conditions import condition_words

TEMPERATURE_FILE = "temperature"
CONDITION_FILE = "condition.gsm"
AUDIO_SUFFIX = ".gsm"

# Sane physical range per authoritative unit
TEMPERATURE_LIMITS = {
    "F": (-100, 150),
    "C": (-60, 60),
}


class AssetLocator(ABC):
    """Finds a pre-recorded audio clip for a single word."""

    @abstractmethod
    def find(self, word: str) -> Optional[Path]:
        """
        Find the clip for a word.

        Returns:
            Path to an existing file, or None if there is no clip
        """
        pass


class LocateAssetLocator(AssetLocator):
    """
    Look clips up in the system `locate` index.

    Takes the first hit for "/<word>.gsm". Without a `locate` binary or a
    populated index nothing is found, which simply means no audio file.
    """

    def __init__(self, command: str = "locate", timeout: float = 10.0):
        self.command = command
        self.timeout = timeout

    def find(self, word: str) -> Optional[Path]:
        executable = shutil.which(self.command)
        if executable is None:
            logging.debug(f"{self.command} not installed, skipping audio lookup")
            return None
        try:
            proc = subprocess.run(
                [executable, f"/{word}{AUDIO_SUFFIX}"],
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logging.debug(f"{self.command} failed for {word!r}: {e}")
            return None

        for line in proc.stdout.splitlines():
            if line.strip():
                return Path(line.strip())
        return None


class DirectoryAssetLocator(AssetLocator):
    """Look clips up under a sounds directory, e.g. /var/lib/sounds/en/rain.gsm."""

    def __init__(self, root: str):
        self.root = Path(root)

    def find(self, word: str) -> Optional[Path]:
        if not self.root.is_dir():
            return None
        direct = self.root / f"{word}{AUDIO_SUFFIX}"
        if direct.is_file():
            return direct
        for match in sorted(self.root.rglob(f"{word}{AUDIO_SUFFIX}")):
            if match.is_file():
                return match
        return None


def clear_outputs(destdir: str) -> None:
    """Remove the previous run's files so a failed run never leaves stale data behind."""
    for name in (TEMPERATURE_FILE, CONDITION_FILE):
        path = Path(destdir) / name
        try:
            path.unlink()
            logging.debug(f"Removed {path}")
        except FileNotFoundError:
            pass
        except OSError as e:
            logging.warning(f"Could not remove {path}: {e}")


def write_temperature(destdir: str, value, mode: str = "F") -> bool:
    """
    Write the authoritative temperature as a bare integer.

    Out-of-range or non-integer values are skipped without error.

    Returns:
        True if the file was written
    """
    low, high = TEMPERATURE_LIMITS[mode]
    if isinstance(value, bool) or not isinstance(value, int):
        logging.debug(f"Temperature {value!r} is not an integer, not writing {TEMPERATURE_FILE}")
        return False
    if not low <= value <= high:
        logging.warning(f"Temperature {value}{mode} outside {low}..{high}, not writing {TEMPERATURE_FILE}")
        return False

    path = Path(destdir) / TEMPERATURE_FILE
    try:
        path.write_text(f"{value}\n")
    except OSError as e:
        logging.warning(f"Could not write {path}: {e}")
        return False
    logging.info(f"Wrote {path}")
    return True


def find_condition_assets(phrase: str, locator: AssetLocator) -> List[Path]:
    """Clips for the first three words of the phrase, in phrase order; missing words are skipped."""
    assets = []
    for word in condition_words(phrase):
        try:
            asset = locator.find(word)
        except OSError as e:
            logging.debug(f"Audio lookup failed for {word!r}: {e}")
            continue
        if asset is not None and asset.is_file():
            assets.append(asset)
        else:
            logging.debug(f"No audio clip for {word!r}")
    return assets


def write_condition_audio(destdir: str, phrase: str, locator: AssetLocator) -> bool:
    """
    Concatenate the per-word clips for a condition phrase into condition.gsm.

    Returns:
        True if the file was written
    """
    if not phrase:
        return False
    assets = find_condition_assets(phrase, locator)
    if not assets:
        logging.info(f"No audio clips found for {phrase!r}")
        return False

    path = Path(destdir) / CONDITION_FILE
    try:
        with open(path, "wb") as out:
            for asset in assets:
                with open(asset, "rb") as clip:
                    shutil.copyfileobj(clip, out)
    except OSError as e:
        logging.warning(f"Could not write {path}: {e}")
        # a truncated clip is worse than none
        try:
            path.unlink()
        except FileNotFoundError:
            pass
        except OSError as unlink_error:
            logging.warning(f"Could not remove partial {path}: {unlink_error}")
        return False
    logging.info(f"Wrote {path} from {len(assets)} clip(s)")
    return True


def build_locator(sounds_dir: Optional[str]) -> AssetLocator:
    if sounds_dir and os.path.isdir(sounds_dir):
        return DirectoryAssetLocator(sounds_dir)
    return LocateAssetLocator()
