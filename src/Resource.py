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
Per-user data directory lookup.

The log file and any persisted configuration live in a writable directory
that is private to the current user. The directory is created on demand.

Functions:
    getWritableResourcePath: Returns the platform-specific path for
        writable application configuration and data.
    fileName: Joins path components below the writable path.
"""

import os

import Version

def getWritableResourcePath():
  """
  Get the platform-specific writable resource path.

  On POSIX systems this is ~/.appname; on Windows it's in APPDATA. The
  CORO_TASK_HOME environment variable overrides both.

  Returns:
      str: The path to the writable resource directory. The directory
          is created if it doesn't exist.
  """
  path = "."
  appname = Version.appName()
  if "CORO_TASK_HOME" in os.environ:
    path = os.environ["CORO_TASK_HOME"]
  elif os.name == "posix":
    path = os.path.expanduser("~/." + appname)
  elif os.name == "nt":
    path = os.path.join(os.environ.get("APPDATA", "."), appname)
  os.makedirs(path, exist_ok = True)
  return path

def fileName(*name):
  """
  Resolve a file name inside the writable resource path.

  Args:
      *name: Path components to join (e.g., "corotask.ini").

  Returns:
      str: The full path to the file.
  """
  return os.path.join(getWritableResourcePath(), *name)
