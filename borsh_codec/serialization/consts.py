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


# Borsh length prefixes are always an unsigned 32-bit little-endian integer
LENGTH_PREFIX_SIZE = 4
MAX_LENGTH = 2**32 - 1

# discriminants (enum values and union tags) are always written as a single byte
MAX_DISCRIMINANT = 2**8 - 1

# presence flag used by optionals
OPTIONAL_ABSENT = 0x00
OPTIONAL_PRESENT = 0x01
