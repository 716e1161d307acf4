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

import os
import shutil
import tempfile
import unittest

import Config

prototype = {}
Config.define("pool", "size",    int,   3,      prototype = prototype)
Config.define("pool", "ratio",   float, 0.5,    prototype = prototype)
Config.define("pool", "enabled", bool,  False,  prototype = prototype)
Config.define("pool", "label",   str,   "pool", prototype = prototype)


class ConfigTest(unittest.TestCase):
  def setUp(self):
    self.directory = tempfile.mkdtemp()
    self.fileName  = os.path.join(self.directory, "test.ini")

  def tearDown(self):
    shutil.rmtree(self.directory)

  def write(self, text):
    with open(self.fileName, "w", encoding = Config.encoding) as f:
      f.write(text)
    return Config.Config(self.fileName, prototype)

  def testDefaultsWithoutFile(self):
    c = Config.Config(prototype = prototype)
    self.assertEqual(c.get("pool", "size"), 3)
    self.assertEqual(c.get("pool", "ratio"), 0.5)
    self.assertEqual(c.get("pool", "enabled"), False)
    self.assertEqual(c.get("pool", "label"), "pool")
    self.assertEqual(c.fileName, None)

  def testFileOverridesDefaults(self):
    c = self.write("[pool]\nsize = 12\nlabel = group\n")
    self.assertEqual(c.fileName, self.fileName)
    self.assertEqual(c.get("pool", "size"), 12)
    self.assertEqual(c.get("pool", "label"), "group")
    self.assertEqual(c.get("pool", "ratio"), 0.5)

  def testBooleanValues(self):
    for value in ("1", "true", "Yes", "on"):
      self.assertEqual(self.write("[pool]\nenabled = %s\n" % value).get("pool", "enabled"), True)
    self.assertEqual(self.write("[pool]\nenabled = off\n").get("pool", "enabled"), False)

  def testMalformedValueRaises(self):
    c = self.write("[pool]\nsize = many\nenabled = perhaps\n")
    self.assertRaises(ValueError, c.get, "pool", "size")
    self.assertRaises(ValueError, c.get, "pool", "enabled")

  def testMissingFileUsesDefaults(self):
    c = Config.Config(self.fileName, prototype)
    self.assertEqual(c.fileName, self.fileName)
    self.assertEqual(c.get("pool", "size"), 3)
    self.assertEqual(c.get("pool", "enabled"), False)

  def testUndefinedKey(self):
    c = self.write("[other]\nkey = 5\n")
    self.assertEqual(c.get("other", "key"), "5")
    self.assertEqual(c.get("other", "missing"), None)

  def testEngineKeysAreDefined(self):
    import Engine
    c = Config.Config()
    self.assertEqual(c.get("engine", "fps"), 60)
    self.assertEqual(c.get("engine", "tickrate"), 1.0)
    self.assertEqual(c.get("engine", "highpriority"), False)

  def testSetAsDefaultKeepsInstalledConfig(self):
    previous = Config.config
    Config.config = None
    try:
      first = Config.load(setAsDefault = True)
      second = Config.load(setAsDefault = True)
      self.assertTrue(Config.config is first)
      self.assertFalse(second is first)
    finally:
      Config.config = previous

if __name__ == "__main__":
  unittest.main()
