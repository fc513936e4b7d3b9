# SPDX-FileCopyrightText: © 2025 Tenstorrent AI ULC
# SPDX-License-Identifier: Apache-2.0

import logging

from .config import TranscoderCfg
from .transcoder import Transcoder


logging.getLogger("regdefgen").addHandler(logging.NullHandler())

__all__ = ["Transcoder", "TranscoderCfg"]
