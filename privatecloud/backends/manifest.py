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

"""Puppet manifest rendering of target declarations"""

import logging
import os

from privatecloud.backends import base
from privatecloud import consts
from privatecloud.errors import errors
from privatecloud import parameters
from privatecloud import utils


log = logging.getLogger(__name__)


def quote(value, mask_secrets=False):
    """Puppet literal for a derived value

    Secrets are replaced by a mask when ``mask_secrets`` is set.

    >>> quote(True)
    'true'
    >>> quote(['10.0.0.1'])
    "['10.0.0.1']"
    """
    if mask_secrets and parameters.is_secret(value):
        value = consts.SECRET_MASK
    if value is None:
        return 'undef'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, int):
        return str(value)
    if isinstance(value, (list, tuple)):
        return '[{0}]'.format(
            ', '.join(quote(v, mask_secrets) for v in value))
    escaped = str(value).replace('\\', '\\\\').replace("'", "\\'")
    return "'{0}'".format(escaped)


def render(declaration, mask_secrets=False):
    """Render one declaration as a Puppet resource block."""
    kind = 'class' if declaration.is_class else declaration.kind
    header = "{0} {{ {1}:".format(kind, quote(declaration.name))
    if not declaration.attributes:
        return header + ' }\n'

    width = max(len(key) for key in declaration.attributes)
    lines = [header]
    for key, value in declaration.attributes.items():
        lines.append('  {0} => {1},'.format(
            key.ljust(width), quote(value, mask_secrets)))
    lines.append('}')
    return '\n'.join(lines) + '\n'


class ManifestBackend(base.Backend):
    """Collects declarations into a single manifest.

    :param mask_secrets: render secrets as a mask, for display only
    """

    def __init__(self, mask_secrets=False):
        self.mask_secrets = mask_secrets
        self._blocks = []

    def apply(self, declaration):
        self._blocks.append(render(declaration, self.mask_secrets))

    @property
    def manifest(self):
        return '\n'.join(self._blocks)

    def reset(self):
        self._blocks = []

    def write(self, path):
        utils.ensure_dir_created(os.path.dirname(path))
        try:
            with open(path, 'w') as f:
                f.write(self.manifest)
        except (IOError, OSError) as exc:
            raise errors.ApplyError(
                "Cannot write manifest {0}: {1}".format(path, exc))
        log.debug('Manifest written to %s', path)
        return path
