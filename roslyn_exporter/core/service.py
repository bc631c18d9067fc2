# Copyright 2026 Cisco Systems, Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# SPDX-License-Identifier: Apache-2.0

"""
Interface to the server holding quality profiles.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from .models import Rule
from .properties import PropertyStore


class BaseSonarQubeService(ABC):
    """Abstract source of server properties and quality-profile rules."""

    @abstractmethod
    async def get_all_properties(self) -> PropertyStore:
        """
        Fetch every property the server declares, unfiltered.

        Returns:
            Property snapshot
        """
        pass

    @abstractmethod
    async def get_rules(self, is_active: bool, quality_profile_key: str) -> list[Rule]:
        """
        Fetch the rules of a quality profile.

        Args:
            is_active: Fetch the rules activated in the profile when True,
                the deactivated ones otherwise.
            quality_profile_key: Key of the quality profile

        Returns:
            Rules in server order
        """
        pass
