# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2026 argprep authors
#

__version__ = "0.1.0"
