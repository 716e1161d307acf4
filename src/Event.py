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
Observer lists for task notifications.

An Event holds an ordered list of listeners and calls all of them,
synchronously, when fired. Listeners are plain callables.

Example:
    >>> finished = Event()
    >>> finished += lambda manual, value: print(manual, value)
    >>> finished.fire(False, 42)
    False 42
"""

class Event:
  """An ordered, duplicate-free list of listeners."""

  def __init__(self):
    self.listeners = []

  def subscribe(self, listener):
    """Add a listener. Adding a listener twice has no effect."""
    if not listener in self.listeners:
      self.listeners.append(listener)

  def unsubscribe(self, listener):
    """Remove a listener. Removing an unknown listener has no effect."""
    if listener in self.listeners:
      self.listeners.remove(listener)

  def fire(self, *args):
    # listeners may (un)subscribe while being notified
    for listener in list(self.listeners):
      listener(*args)

  def __iadd__(self, listener):
    self.subscribe(listener)
    return self

  def __isub__(self, listener):
    self.unsubscribe(listener)
    return self

  def __len__(self):
    return len(self.listeners)

  def __contains__(self, listener):
    return listener in self.listeners
