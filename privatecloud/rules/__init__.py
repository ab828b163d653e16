# -*- coding: utf-8 -*-

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

import collections

from privatecloud.errors import errors
from privatecloud.rules.base import Profile
from privatecloud.rules import image
from privatecloud.rules import telemetry


PROFILES = collections.OrderedDict(
    (profile.name, profile) for profile in (
        image.IMAGE,
        telemetry.TELEMETRY,
        telemetry.TELEMETRY_SERVER,
    )
)


def get_profile(name):
    """Profile by its class name; Profile instances are returned as is."""
    if isinstance(name, Profile):
        return name
    try:
        return PROFILES[name]
    except KeyError:
        raise errors.UnknownProfile(
            "Unknown profile '{0}', expected one of: {1}".format(
                name, ', '.join(PROFILES)))
