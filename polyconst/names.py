#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
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
#
#
"""Static strings used in the polyconst package

    Share document

        KEYS = 'keys'

        N = 'n'

        K = 'k'

        BASE = 'base'

        VALUE = 'value'

    Keyword arguments of find_constant

        VERIFY = 'verify'

    Plotting

        POINTS = 'points'

        PLT_BACKEND = 'plt_backend'

        SHOW = 'show'

    Digits and bases

        DIGITS = '0123456789abcdefghijklmnopqrstuvwxyz'

        MIN_BASE = 2

        MAX_BASE = 36
"""

KEYS = 'keys'
N = 'n'
K = 'k'
BASE = 'base'
VALUE = 'value'

VERIFY = 'verify'

POINTS = 'points'
PLT_BACKEND = 'plt_backend'
SHOW = 'show'

DIGITS = '0123456789abcdefghijklmnopqrstuvwxyz'
MIN_BASE = 2
MAX_BASE = len(DIGITS)
