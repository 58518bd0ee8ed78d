"""0.0.1.2026.1019.0000.00"""