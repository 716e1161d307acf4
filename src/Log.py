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
Logging utilities for CoroTask.

This module provides a simple logging system with support for different
log levels (debug, notice, warn, error). Log messages are written to both
the console (when verbose mode is enabled) and a log file.

Features:
    - Color-coded console output on POSIX systems (Linux/macOS)
    - Log file created in the user's writable resource path on first use
    - Quiet mode by default; enable verbose with -v command line flag
      or setVerbose(True)
    - Four log levels: debug, notice, warn, error

Example usage:
    >>> import Log
    >>> Log.notice("Pool started with 3 tasks")
    >>> Log.debug("Task finished")
    >>> Log.warn("Task pool is locked")
    >>> Log.error("Coroutine raised an exception")
"""

import sys
import os
import Resource
import Version

quiet = True
logFile = None
encoding = "utf-8"

if "-v" in sys.argv:
  quiet = False

if os.name == "posix":
  labels = {
    "warn":   "\033[1;33m(W)\033[0m",
    "debug":  "\033[1;34m(D)\033[0m",
    "notice": "\033[1;32m(N)\033[0m",
    "error":  "\033[1;31m(E)\033[0m",
  }
else:
  labels = {
    "warn":   "(W)",
    "debug":  "(D)",
    "notice": "(N)",
    "error":  "(E)",
  }

def setVerbose(verbose):
  """Enable or disable console output.

  Args:
      verbose: If True, messages are echoed to stdout as well.
  """
  global quiet
  quiet = not verbose

def _openLogFile():
  global logFile
  if logFile is None:
    logFile = open(Resource.fileName(Version.appName() + ".log"), "w", encoding = encoding)
  return logFile

def log(cls, msg):
  """Write a log message with the specified classification.

  Outputs the message to the log file, and optionally to the console
  if verbose mode is enabled. Messages are prefixed with a
  classification label.

  Args:
      cls: Log classification - one of 'debug', 'notice', 'warn', 'error'.
      msg: The message to log. Will be converted to string if needed.
  """
  msg = str(msg)
  if not quiet:
    print(labels[cls] + " " + msg)
  f = _openLogFile()
  print(labels[cls] + " " + msg, file=f)
  f.flush()


def warn(msg):
  """Log a warning message."""
  log("warn", msg)


def debug(msg):
  log("debug", msg)


def notice(msg):
  log("notice", msg)


def error(msg):
  """Log an error message."""
  log("error", msg)
