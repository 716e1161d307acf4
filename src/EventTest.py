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

import unittest

from Event import Event


class EventTest(unittest.TestCase):
  def testFireInSubscriptionOrder(self):
    calls = []
    event = Event()
    event += lambda value: calls.append(("a", value))
    event += lambda value: calls.append(("b", value))
    event.fire(7)
    self.assertEqual(calls, [("a", 7), ("b", 7)])

  def testNoDuplicates(self):
    calls = []
    listener = lambda: calls.append(1)
    event = Event()
    event.subscribe(listener)
    event.subscribe(listener)
    event.fire()
    self.assertEqual(calls, [1])
    self.assertEqual(len(event), 1)
    self.assertTrue(listener in event)

  def testUnsubscribeIsIdempotent(self):
    listener = lambda: None
    event = Event()
    event.unsubscribe(listener)
    event += listener
    event -= listener
    event -= listener
    self.assertEqual(len(event), 0)

  def testUnsubscribeWhileFiring(self):
    calls = []
    event = Event()
    def once():
      calls.append("once")
      event.unsubscribe(once)
    event += once
    event += lambda: calls.append("always")
    event.fire()
    event.fire()
    self.assertEqual(calls, ["once", "always", "always"])

  def testListenerErrorPropagates(self):
    def broken():
      raise RuntimeError("listener failed")
    event = Event()
    event += broken
    self.assertRaises(RuntimeError, event.fire)

if __name__ == "__main__":
  unittest.main()
