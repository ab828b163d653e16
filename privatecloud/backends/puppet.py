#    Copyright 2014 Mirantis, Inc.
#
#    Licensed under the Apache License, Version 2.0 (the "License"); you may
#    not use this file except in compliance with the License. You may obtain
#    a copy of the License at
#
#         http://www.apache.org/licenses/LICENSE-2.0
#
#    Unless required by applicable law or agreed to in writing, software
#    distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
#    WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
#    License for the specific language governing permissions and limitations
#    under the License.

import logging
import os
import shlex

from privatecloud.backends import manifest
from privatecloud import consts
from privatecloud.errors import errors
from privatecloud import utils


log = logging.getLogger(__name__)


class PuppetApplyBackend(manifest.ManifestBackend):
    """Applies declarations with a local ``puppet apply`` run.

    All declarations handed to apply_all go into one manifest which is
    applied at once.
    """

    def __init__(self, config, manifest_name='site.pp', noop=False):
        super(PuppetApplyBackend, self).__init__()
        self.config = config
        self.manifest_name = manifest_name
        self.noop = noop
        self.exit_code = None
        self.stdout = None
        self.stderr = None

    @property
    def manifest_path(self):
        return os.path.join(self.config.MANIFEST_DIR or os.getcwd(),
                            self.manifest_name)

    def command(self, path):
        cmd = ['puppet', 'apply', '--detailed-exitcodes']
        if self.config.PUPPET_MODULES:
            cmd.append('--modulepath={0}'.format(self.config.PUPPET_MODULES))
        if self.config.PUPPET_OPTIONS:
            cmd.extend(shlex.split(self.config.PUPPET_OPTIONS))
        if self.noop:
            cmd.append('--noop')
        cmd.append(path)
        return cmd

    def apply(self, declaration):
        self.apply_all([declaration])

    def apply_all(self, declarations):
        self.reset()
        for declaration in declarations:
            super(PuppetApplyBackend, self).apply(declaration)
        path = self.write(self.manifest_path)

        cmd = self.command(path)
        log.debug("Running puppet with command '%s'", ' '.join(cmd))
        try:
            self.exit_code, self.stdout, self.stderr = utils.execute(cmd)
        except OSError as exc:
            raise errors.ApplyError(
                "Cannot run puppet: {0}".format(exc), log_message=True,
                log_level='error')

        log.debug("Puppet returned code '%s' out: '%s' err: '%s'",
                  self.exit_code, self.stdout, self.stderr)

        if self.exit_code not in consts.PUPPET_SUCCESS_CODES:
            raise errors.ApplyError(
                "puppet apply of {0} failed with exit code {1}: {2}".format(
                    path, self.exit_code, (self.stderr or '').strip()),
                log_message=True, log_level='error')
        return self.exit_code
