"""Fish prompt settings.

Config path: ~/.config/fish/config.fish
Line format:
  set -gx fish_prompt '<prompt>'
"""

SHELL_NAME = "fish"
DISPLAY_NAME = "Fish"
CONFIG_PATH = ".config/fish/config.fish"
LINE_TEMPLATE = "set -gx fish_prompt '{prompt}'"
