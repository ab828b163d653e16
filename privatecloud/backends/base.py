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


log = logging.getLogger(__name__)


class Backend(object):
    """Provisioning layer consuming target declarations.

    Implementations raise errors.ApplyError when a declaration can't be
    applied.
    """

    def apply(self, declaration):
        raise NotImplementedError('Should be implemented by backend driver.')

    def apply_all(self, declarations):
        for declaration in declarations:
            log.debug('Applying %s', declaration.reference)
            self.apply(declaration)
