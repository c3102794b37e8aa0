#
# Copyright (C) 2026 InputPlumber Client Developers — LGPL-3.0-or-later
#
