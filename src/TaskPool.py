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
Task pools for CoroTask.

A TaskPool groups tasks so they can be started, stopped, paused and
unpaused together, and reports once through its allFinished event when
every member has finished.

The pool locks itself on startAll(): no further task can be added after
the group was started. Members should be PoolTasks, which do not start on
construction, so that startAll() is the only thing that starts them.

An empty pool starts trivially and reports allRunning and allPaused, but
its allFinished event never fires.

Example:
    >>> pool = TaskPool()
    >>> pool.add(PoolTask(fadeOut(music)))
    True
    >>> pool.add(PoolTask(fadeOut(lights)))
    True
    >>> pool.allFinished += showCredits
    >>> pool.startAll()
"""

from Event import Event
import Log


class TaskPool:
  """
  A group of tasks with a single completion barrier.

  Attributes:
      tasks (list): Member tasks, in the order they were added
      locked (bool): True once startAll() has been called
      finishedCount (int): Number of distinct members that have finished
      allFinishedFired (bool): True once allFinished has fired
      allFinished (Event): Fired without arguments when every member finished
  """

  def __init__(self):
    self.tasks            = []
    self.locked           = False
    self.finishedCount    = 0
    self.allFinishedFired = False
    self.allFinished      = Event()
    self._finishedTasks   = []

  def __len__(self):
    return len(self.tasks)

  def __iter__(self):
    return iter(list(self.tasks))

  def add(self, task):
    """
    Add a task to the pool.

    Args:
        task (Task.Task): The task to add, normally a PoolTask

    Returns:
        bool: True if the task was added. False, leaving the pool
            unchanged, once the pool has been started, or when the task is
            already a member, has been started, stopped or has finished.
    """
    if self.locked:
      Log.warn("Task pool is locked; rejected %r." % task)
      return False

    if task in self.tasks:
      Log.warn("Task %r is already in the pool." % task)
      return False

    if task.running or task.stopped or task.task.finished:
      Log.warn("Task %r was already started or stopped; rejected." % task)
      return False

    self.tasks.append(task)
    task.finished.subscribe(lambda manual, lastValue: self.taskFinished(task, manual))
    return True

  def startAll(self):
    """Lock the pool and start all of its tasks together."""
    self.locked = True
    Log.notice("Starting task pool with %d tasks." % len(self.tasks))
    for task in self.tasks:
      task.start()

  def stopAll(self):
    for task in self.tasks:
      task.stop()

  def pauseAll(self):
    for task in self.tasks:
      task.pause()

  def unpauseAll(self):
    """Resume all the tasks that are paused in the pool."""
    for task in self.tasks:
      task.unpause()

  @property
  def allRunning(self):
    """True if every member is running. Vacuously true for an empty pool."""
    return all(task.running for task in self.tasks)

  @property
  def allPaused(self):
    """True if every member is paused. Vacuously true for an empty pool."""
    return all(task.paused for task in self.tasks)

  def taskFinished(self, task, manual):
    if task in self._finishedTasks:
      Log.warn("Task %r reported finishing twice." % task)
      return

    self._finishedTasks.append(task)
    self.finishedCount += 1
    Log.debug("Pool task finished (manual=%s), %d of %d." % (manual, self.finishedCount, len(self.tasks)))

    if not self.allFinishedFired and self.finishedCount == len(self.tasks):
      self.allFinishedFired = True
      Log.notice("All %d pool tasks finished." % self.finishedCount)
      self.allFinished.fire()
