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
Task module for CoroTask.

A Task represents a coroutine that runs on the scheduling engine. Tasks can
be started, paused, unpaused and stopped. When the coroutine completes,
either by running out of steps or through stop(), every subscriber of the
task's finished event is notified with:

    manual: True if and only if the task was stopped with stop()
    lastValue: The last value the coroutine yielded, or None

It is an error to start a task that has been stopped or which has
naturally terminated.

Example:
    >>> def blink(light):
    ...     while True:
    ...         light.toggle()
    ...         yield light.on
    >>> task = Task(blink(light))
    >>> task.finished += lambda manual, lastValue: print("done", manual)
    >>> task.stop()
"""

from Event import Event
from TaskState import TaskState


class Task:
    """
    Public handle over one TaskState.

    Attributes:
        task (TaskState): The owned task state
        finished (Event): Termination event, fired with (manual, lastValue)
    """

    def __init__(self, coroutine, autoStart=True, engine=None):
        """
        Create a new Task object for the given coroutine.

        Args:
            coroutine: Iterator, iterable or generator to drive, or None
            autoStart (bool): Start the task upon construction (default: True)
            engine (Engine.Engine): Scheduler to run on (default: the
                process-wide default engine)
        """
        self.task = TaskState(coroutine, engine)
        self.finished = Event()
        self.task.finishedCallback = self.taskFinished
        if autoStart:
            self.start()

    def __repr__(self):
        return "<%s %s running=%s paused=%s>" % \
            (self.__class__.__name__, self.task.name, self.running, self.paused)

    @property
    def running(self):
        """True if and only if the coroutine is running. Paused tasks are considered to be running."""
        return self.task.running

    @property
    def paused(self):
        """True if and only if the coroutine is currently paused."""
        return self.task.paused

    @property
    def stopped(self):
        return self.task.stopped

    @property
    def lastValue(self):
        return self.task.lastValue

    def start(self):
        """Begin execution of the coroutine on the next engine tick."""
        self.task.start()

    def stop(self):
        """Discontinue execution of the coroutine at its next tick."""
        self.task.stop()

    def pause(self):
        self.task.pause()

    def unpause(self):
        self.task.unpause()

    def taskFinished(self, manual, lastValue):
        self.finished.fire(manual, lastValue)


class PoolTask(Task):
    """
    A task for use in a TaskPool. Pool tasks never start on construction,
    so that all tasks within the pool can be started together.
    """

    def __init__(self, coroutine, engine=None):
        Task.__init__(self, coroutine, autoStart=False, engine=engine)
