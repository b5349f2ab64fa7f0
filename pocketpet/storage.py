import os
import json

from .constants import SAVE_FILE


class SnapshotStore:
    """Keeps the pet 'alive' on disk as a single JSON snapshot."""
    def __init__(self, path=None):
        self.path = path or SAVE_FILE

    def save(self, stats):
        """Best-effort write. Uses an atomic replace so a crash never leaves a truncated save.

        Failures are reported and swallowed; the simulation keeps running from memory.
        """
        tmp = self.path + ".tmp"
        try:
            with open(tmp, 'w') as f:
                json.dump(stats.to_snapshot(), f)
            os.replace(tmp, self.path)
            return True
        except (OSError, TypeError, ValueError) as e:
            print(f"Warning: could not save state to '{self.path}': {e}")
            try:
                os.remove(tmp)
            except OSError:
                pass
            return False

    def load(self):
        """Returns the decoded snapshot, or None if there is nothing usable on disk."""
        if not os.path.exists(self.path):
            return None
        try:
            with open(self.path, 'r') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError, UnicodeDecodeError, RecursionError) as e:
            print(f"Warning: failed to read save file '{self.path}': {e}")
            return None
        if not isinstance(data, dict):
            print(f"Warning: ignoring save file '{self.path}': expected an object, got {type(data).__name__}")
            return None
        return data

    def clear(self):
        try:
            os.remove(self.path)
        except FileNotFoundError:
            pass
        except OSError as e:
            print(f"Warning: could not remove save file '{self.path}': {e}")
