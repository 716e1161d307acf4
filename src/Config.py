#####################################################################
# -*- coding: utf-8 -*-                                             #
#                                                                   #
# CoroTask                                                          #
# Copyright (C) 2006 Sami Kyöstilä                                  #
# Python 3 Port (2026)                                              #
#                                                                   #
# This program is free software; you can redistribute it and/or     #
# modify it under the terms of the GNU General Public License       #
# as published by the Free Software Foundation; either version 2    #
# of the License, or (at your option) any later version.            #
#                                                                   #
# This program is distributed in the hope that it will be useful,   #
# but WITHOUT ANY WARRANTY; without even the implied warranty of    #
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the     #
# GNU General Public License for more details.                      #
#                                                                   #
# You should have received a copy of the GNU General Public License #
# along with this program; if not, write to the Free Software       #
# Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston,        #
# MA  02110-1301, USA.                                              #
#####################################################################

"""
Configuration for CoroTask.

Settings are read from an INI file. Every key is declared with define() by
the module that reads it, together with its type and default, so a missing
file or a missing key simply yields the default:

    [engine]
    fps = 30
    tickrate = 0.5

Only the default engine reads configuration; tasks and pools never do.

Example usage:
    >>> define("engine", "fps", int, 60)
    >>> load("corotask.ini", setAsDefault = True)
    >>> get("engine", "fps")
    30
"""

from configparser import ConfigParser
import os

import Log
import Resource

encoding  = "utf-8"
config    = None
prototype = {}

def define(section, option, type, default, prototype = prototype):
  """Declare a key with the type its value is parsed as and its default."""
  prototype.setdefault(section, {})[option] = (type, default)

def load(fileName = None, setAsDefault = False):
  """Read a configuration file.

  Args:
      fileName: Path to the INI file. A name that is not an existing file
          is looked up in the writable resource path. None reads nothing.
      setAsDefault: Install the result as the configuration behind get(),
          unless one is installed already.

  Returns:
      Config: The loaded configuration.
  """
  global config
  c = Config(fileName)
  if setAsDefault and config is None:
    config = c
  return c

class Config:
  """Typed, read-only view of one INI file."""

  def __init__(self, fileName = None, prototype = prototype):
    self.prototype = prototype
    self.parser    = ConfigParser()
    self.fileName  = None

    if fileName:
      if not os.path.isfile(fileName):
        fileName = Resource.fileName(fileName)
      self.fileName = fileName
      if self.parser.read(fileName, encoding = encoding):
        Log.notice("Read configuration from %s." % fileName)
      else:
        Log.debug("No configuration at %s, using defaults." % fileName)

  def get(self, section, option):
    """Return the value of section.option parsed as its declared type.

    Undeclared keys are returned as strings, or None when absent.

    Raises:
        ValueError: If the value in the file does not parse as its type.
    """
    try:
      type, default = self.prototype[section][option]
    except KeyError:
      Log.warn("Config key %s.%s not defined while reading." % (section, option))
      type, default = str, None

    if not self.parser.has_option(section, option):
      return default
    if type == bool:
      return self.parser.getboolean(section, option)
    return type(self.parser.get(section, option))

def get(section, option):
  """Read a value from the configuration installed by load(setAsDefault = True)."""
  return config.get(section, option)
