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
Core Engine Module
==================

This module provides the scheduler that drives coroutine tasks. The Engine
keeps a list of registered tasks and invokes each of them once per tick,
in registration order, until they unregister themselves.

A registered task is any object implementing:
    - started(): called once when the task is added
    - run(ticks): called once per tick while registered
    - ended(): called once when the task is removed

Ticks can be issued directly with tick(), or paced in real time with run(),
which asks the Timer for the elapsed time of each frame.

Example:
    engine = Engine(fps=60, tickrate=1.0)
    task = Task(myCoroutine(), engine=engine)
    while engine.run():
        pass
"""

import Config
import Log
from Timer import Timer

# define configuration keys
Config.define("engine", "fps",          int,   60)
Config.define("engine", "tickrate",     float, 1.0)
Config.define("engine", "highpriority", bool,  False)


class Engine:
    """
    Tick-driven scheduler for cooperative tasks.

    Attributes:
        tasks (list): Registered tasks, in registration order
        paused (list): Tasks suspended at the engine level
        tickCount (int): Number of ticks performed so far
    """

    def __init__(self, fps=60, tickrate=1.0, timer=None):
        """
        Initialize the engine.

        Args:
            fps (int): Target ticks per second for run() (default: 60)
            tickrate (float): Time scaling factor (default: 1.0)
            timer (Timer): Frame pacing source; created lazily from fps and
                tickrate on the first run() when not given
        """
        self.tasks = []
        self.paused = []
        self.tickCount = 0
        self.fps = fps
        self.tickrate = tickrate
        self.highPriority = False
        self._timer = timer

    @property
    def timer(self):
        if self._timer is None:
            self._timer = Timer(fps=self.fps, tickrate=self.tickrate)
            self._timer.highPriority = self.highPriority
        return self._timer

    def quit(self):
        """Remove all tasks from the engine."""
        for t in list(self.tasks):
            self.removeTask(t)

    def addTask(self, task):
        """
        Register a task. Registering a task twice has no effect.

        Args:
            task: Object implementing started(), run(ticks) and ended()
        """
        if task not in self.tasks:
            self.tasks.append(task)
            task.started()

    def removeTask(self, task):
        """
        Unregister a task. Unknown tasks are ignored.

        Args:
            task: The task to remove
        """
        if task in self.tasks:
            self.tasks.remove(task)
            if task in self.paused:
                self.paused.remove(task)
            task.ended()

    def hasTask(self, task):
        return task in self.tasks

    def pauseTask(self, task):
        """
        Suspend a task at the engine level (it won't run until resumed).

        Args:
            task: The task to pause
        """
        if task not in self.paused:
            self.paused.append(task)

    def resumeTask(self, task):
        """
        Resume a task suspended with pauseTask().

        Args:
            task: The task to resume
        """
        if task in self.paused:
            self.paused.remove(task)

    def _runTask(self, task, ticks=0):
        """Run a single task if it's still registered and not paused."""
        if task in self.tasks and task not in self.paused:
            task.run(ticks)

    def tick(self, ticks=0):
        """
        Perform one scheduling tick.

        Every task registered when the tick begins runs once. Tasks added
        during the tick run from the next tick on; tasks removed during the
        tick are skipped.

        Args:
            ticks: Elapsed time to pass on to the tasks
        """
        self.tickCount += 1
        for task in list(self.tasks):
            self._runTask(task, ticks)

    def run(self):
        """
        Run one paced frame of the scheduler loop.

        Waits for the timer and performs one tick per tick value it yields.

        Returns:
            bool: True if the engine should continue, False if no tasks remain
        """
        if not self.tasks:
            return False

        for ticks in self.timer.advanceFrame():
            self.tick(ticks)

        return True

    def runUntilIdle(self, maxTicks=None):
        """
        Tick until no task is registered.

        Args:
            maxTicks (int): Give up after this many ticks (default: no limit)

        Returns:
            int: Number of ticks performed
        """
        count = 0
        while self.tasks and (maxTicks is None or count < maxTicks):
            self.tick()
            count += 1
        if self.tasks:
            Log.warn("Engine still has %d tasks after %d ticks." % (len(self.tasks), count))
        return count


_defaultEngine = None


def getDefaultEngine():
    """
    Return the process-wide default engine, creating it on first use.

    When a default configuration has been loaded, its engine.* keys are used.
    """
    global _defaultEngine
    if _defaultEngine is None:
        if Config.config is not None:
            engine = Engine(fps=Config.get("engine", "fps"),
                            tickrate=Config.get("engine", "tickrate"))
            engine.highPriority = Config.get("engine", "highpriority")
        else:
            engine = Engine()
        Log.debug("Created default engine.")
        _defaultEngine = engine
    return _defaultEngine


def setDefaultEngine(engine):
    """
    Install an engine as the process-wide default, or reset it with None.

    Returns:
        The previous default engine, or None.
    """
    global _defaultEngine
    previous = _defaultEngine
    _defaultEngine = engine
    return previous
