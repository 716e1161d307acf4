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
Task state module for CoroTask.

A TaskState drives one coroutine (any iterator, usually a generator) on an
Engine. Once started, the engine calls run() every tick; each call advances
the coroutine by one step until it is exhausted or stopped, and then the
state reports its end exactly once through its finished callback.

The first call after start() only arms the task, so callers always observe
running == True before the coroutine executes any of its code.

Lifecycle:
    Created -> Running <-> Paused -> Finished(manual)

Example:
    >>> def countdown():
    ...     for n in (3, 2, 1):
    ...         yield n
    >>> state = TaskState(countdown(), engine)
    >>> state.finishedCallback = lambda manual, lastValue: print(manual, lastValue)
    >>> state.start()
    >>> engine.runUntilIdle()
    False 1
"""

import Engine
import Log


class TaskException(Exception):
    """
    Raised when a task is used against its lifecycle, such as starting a
    task that is running, was stopped or has already finished.
    """
    pass


class TaskState:
    """
    The stepping engine around one coroutine.

    Attributes:
        engine (Engine.Engine): The scheduler this task registers with
        finishedCallback (callable): Called once with (manual, lastValue)
            when the task ends
        name (str): Label used in log messages
    """

    def __init__(self, coroutine, engine=None):
        """
        Args:
            coroutine: Iterator or iterable producing one value per step.
                None is treated as an already exhausted coroutine.
            engine (Engine.Engine): Scheduler to register with on start().
                Defaults to the process-wide default engine.
        """
        self._coroutine = iter(coroutine) if coroutine is not None else None
        self.engine = engine if engine is not None else Engine.getDefaultEngine()
        self.name = getattr(coroutine, "__name__", type(coroutine).__name__)
        self.finishedCallback = None
        self._running = False
        self._paused = False
        self._stopped = False
        self._armed = False
        self._finished = False
        self._lastValue = None

    def __repr__(self):
        return "<TaskState %s running=%s paused=%s stopped=%s>" % \
            (self.name, self._running, self._paused, self._stopped)

    @property
    def coroutine(self):
        return self._coroutine

    @property
    def running(self):
        """True from start() until the task ends. Paused tasks are running."""
        return self._running

    @property
    def paused(self):
        return self._paused

    @property
    def stopped(self):
        """True if stop() was called before the coroutine ended by itself."""
        return self._stopped

    @property
    def finished(self):
        """True once the task has ended and left the engine."""
        return self._finished

    @property
    def lastValue(self):
        """The value most recently yielded by the coroutine, or None."""
        return self._lastValue

    def start(self):
        """
        Register the task with the engine. Stepping begins on the next tick.

        Raises:
            TaskException: If the task is running, was stopped or has finished.
        """
        if self._running:
            raise TaskException("Task %s is already running." % self.name)
        if self._finished or self._stopped:
            raise TaskException("Task %s has ended and cannot be started again." % self.name)
        self._running = True
        self._armed = False
        self.engine.addTask(self)

    def stop(self):
        """
        Discontinue the task at its next tick. Calling stop() more than once
        has no further effect. Stopping a task that was never started
        retires it for good: it can no longer be started and never finishes.
        """
        if self._finished or self._stopped:
            return
        self._stopped = True
        self._running = False

    def pause(self):
        self._paused = True

    def unpause(self):
        self._paused = False

    # Engine task protocol

    def started(self):
        Log.debug("Task %s started." % self.name)

    def ended(self):
        Log.debug("Task %s left the engine." % self.name)

    def run(self, ticks):
        """
        Advance the task by one step.

        Args:
            ticks: Elapsed time passed on by the engine (unused)
        """
        if self._finished:
            return

        if not self._armed:
            self._armed = True
        elif self._running and not self._paused:
            self._step()

        if not self._running:
            self._finish()

    def _step(self):
        if self._coroutine is None:
            self._running = False
            return
        try:
            self._lastValue = next(self._coroutine)
        except StopIteration:
            self._running = False
        except Exception as e:
            Log.error("Task %s raised %s: %s" % (self.name, e.__class__.__name__, e))
            self._running = False
            self._retire()
            raise

    def _retire(self):
        self._finished = True
        self.engine.removeTask(self)

    def _finish(self):
        self._retire()
        Log.debug("Task %s finished (manual=%s)." % (self.name, self._stopped))
        if self.finishedCallback:
            self.finishedCallback(self._stopped, self._lastValue)
