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

from Timer import Timer


class ScriptedClock:
  def __init__(self, times):
    self.times = list(times)

  def __call__(self):
    return self.times.pop(0)


class TimerTest(unittest.TestCase):
  def testWaitsForTimestep(self):
    waits = []
    clock = ScriptedClock([0, 5, 9, 10])
    timer = Timer(fps = 100, clock = clock, wait = lambda: waits.append(True))
    self.assertEqual(timer.advanceFrame(), [10])
    self.assertEqual(len(waits), 2)
    self.assertEqual(timer.frame, 1)

  def testHighPriorityDoesNotWait(self):
    waits = []
    timer = Timer(fps = 100, clock = ScriptedClock([0, 3, 12]), wait = lambda: waits.append(True))
    timer.highPriority = True
    self.assertEqual(timer.advanceFrame(), [12])
    self.assertEqual(waits, [])

  def testDeltaIsCapped(self):
    timer = Timer(fps = 100, clock = ScriptedClock([0, 100000]))
    self.assertEqual(timer.advanceFrame(), [160.0])

  def testTickrateScalesTime(self):
    timer = Timer(fps = 100, tickrate = 0.5, clock = ScriptedClock([0, 40]))
    self.assertEqual(timer.advanceFrame(), [20])

  def testFpsEstimate(self):
    times = [0] + [20 * n for n in range(1, 20)]
    timer = Timer(fps = 50, clock = ScriptedClock(times))
    for i in range(13):
      timer.advanceFrame()
    self.assertAlmostEqual(timer.fpsEstimate, 50.0)

  def testInvalidFps(self):
    self.assertRaises(ValueError, Timer, fps = 0, clock = lambda: 0)

if __name__ == "__main__":
  unittest.main()
