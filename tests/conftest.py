# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


import os

import pytest

from borsh_codec.conf import UNITTESTS_SETTINGS_FILEPATH, get_global_settings
from borsh_codec.logging import LoggingOutput, setup_logging

os.environ['BORSH_CONFIG_YAML'] = os.environ.get('BORSH_TEST_CONFIG_YAML', UNITTESTS_SETTINGS_FILEPATH)

setup_logging(logging_output=LoggingOutput.PRETTY, debug=True)


@pytest.fixture
def settings_limits() -> tuple[int, int]:
    settings = get_global_settings()
    return settings.MAX_ALLOCATION_ITEMS, settings.MAX_ALLOCATION_BYTES
