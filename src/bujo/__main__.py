# SPDX-License-Identifier: MIT

from bujo import main

main()
