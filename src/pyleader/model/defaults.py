# ---------------------------------------------------------------------------
# File: defaults.py
# ---------------------------------------------------------------------------
# Description:
#	Seed config document written on first run.
#
# Notes:
#	- Content only matters for the first-run experience.
#	- Kept as text (not a built tree) so it lands on disk exactly as written.
# ---------------------------------------------------------------------------

from __future__ import annotations

DEFAULT_CONFIG_JSON = """\
{
  "type": "group",
  "actions": [
    { "key": "t", "type": "application", "value": "/System/Applications/Utilities/Terminal.app" },
    { "key": ",", "type": "url", "value": "pyleader://settings", "label": "pyleader Settings" },
    {
      "key": "o",
      "type": "group",
      "actions": [
        { "key": "s", "type": "application", "value": "/Applications/Safari.app" },
        { "key": "e", "type": "application", "value": "/Applications/Mail.app" },
        { "key": "i", "type": "application", "value": "/System/Applications/Music.app" },
        { "key": "m", "type": "application", "value": "/Applications/Messages.app" }
      ]
    },
    {
      "key": "r",
      "type": "group",
      "actions": [
        { "key": "e", "type": "url", "value": "raycast://extensions/raycast/emoji-symbols/search-emoji-symbols" },
        { "key": "p", "type": "url", "value": "raycast://confetti" },
        { "key": "c", "type": "url", "value": "raycast://extensions/raycast/system/open-camera" }
      ]
    }
  ]
}
"""
