"""Bash prompt settings.

Config path: ~/.bashrc
Line format:
  PS1='<prompt>'
"""

SHELL_NAME = "bash"
DISPLAY_NAME = "Bash"
CONFIG_PATH = ".bashrc"
LINE_TEMPLATE = "PS1='{prompt}'"
