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
Timer module for CoroTask.

This module provides tick pacing for the scheduler loop. The Timer class
keeps the scheduler at a consistent rate by controlling when the next
frame may advance, and provides a rate estimate for monitoring.

The timer supports:
    - Configurable target frame rate
    - Adjustable tick rate for slow-motion or fast-forward effects
    - High-priority mode (busy waiting) for more accurate timing
    - Real-time FPS estimation
    - An injectable clock, so hosts and tests can supply their own time source

Example:
    >>> timer = Timer(fps=60, tickrate=1.0)
    >>> while running:
    ...     for ticks in timer.advanceFrame():
    ...         engine.tick(ticks)
"""

import pygame


def pygameClock():
    """
    Default clock: milliseconds since pygame was initialized.

    The pygame time module only counts once pygame is initialized, so
    initialize it on first use.
    """
    if not pygame.get_init():
        pygame.init()
    return pygame.time.get_ticks()


def pygameWait():
    """Default idle callback: yield the CPU back to the system for a moment."""
    pygame.time.wait(0)


class Timer(object):
    """
    Frame timer for controlling scheduler loop timing and measuring FPS.

    Attributes:
        fps (int): Target frames per second.
        timestep (float): Milliseconds per frame (1000 / fps).
        tickrate (float): Time scaling factor (1.0 = normal speed).
        ticks (int): Current time in scaled milliseconds.
        frame (int): Total frames since timer creation.
        fpsEstimate (float): Estimated current FPS based on recent frames.
        highPriority (bool): If True, busy-waits for precise timing.
            If False, yields CPU time while waiting.
    """

    def __init__(self, fps=60, tickrate=1.0, clock=None, wait=None):
        """
        Initialize the timer with target framerate and tick rate.

        Args:
            fps (int): Target frames per second. Defaults to 60.
            tickrate (float): Time scaling multiplier. Defaults to 1.0.
            clock (callable): Returns the current time in milliseconds.
                Defaults to the pygame clock.
            wait (callable): Called while waiting for the next frame when
                not in high-priority mode. Defaults to pygame.time.wait(0).
        """
        if fps <= 0:
            raise ValueError("fps must be positive, got %r" % fps)
        self.clock = clock or pygameClock
        self.wait = wait or pygameWait
        self.fps = fps
        self.timestep = 1000.0 / fps
        self.tickrate = tickrate
        self.ticks = self.getTime()
        self.frame = 0
        self.fpsEstimate = 0
        self.fpsEstimateStartTick = self.ticks
        self.fpsEstimateStartFrame = self.frame
        self.highPriority = False

    def getTime(self):
        """
        Get the current time in scaled milliseconds.

        Returns:
            int: Current clock time multiplied by the tick rate.
        """
        return int(self.clock() * self.tickrate)

    time = property(getTime)

    def advanceFrame(self):
        """
        Wait for the next frame and return timing information.

        Blocks until enough time has elapsed for the next frame according
        to the target FPS. Updates the FPS estimate periodically.

        Returns:
            list: A single-element list containing the elapsed time in
                milliseconds since the last frame, capped at 16x the
                timestep so a long stall does not produce a huge delta.
        """
        while True:
            ticks = self.getTime()
            diff = ticks - self.ticks
            if diff >= self.timestep:
                break
            if not self.highPriority:
                self.wait()

        self.ticks = ticks
        self.frame += 1

        if ticks > self.fpsEstimateStartTick + 250:
            n = self.frame - self.fpsEstimateStartFrame
            self.fpsEstimate = 1000.0 * n / (ticks - self.fpsEstimateStartTick)
            self.fpsEstimateStartTick = ticks
            self.fpsEstimateStartFrame = self.frame

        return [min(diff, self.timestep * 16)]
