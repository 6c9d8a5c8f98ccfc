"""Shared application constants.

Centralizes the demonstration data written on first startup and the
hyperlinks advertised in every API response.
"""

# Conventional values; the store accepts any string for these fields
DIRECTIONS = ("left", "right")
SMOOTHNESS_VALUES = ("smooth", "abrupt")

# Demonstration runs seeded into an empty store.
# Each turn: (direction, parallelness, closeness, smoothness, start, end)
SEED_RUNS = [
    {
        "start_time": "2024-02-20T10:00:00Z",
        "end_time": "2024-02-20T10:01:30Z",
        "path": "M 0 50 C 25 25, 75 75, 100 50",
        "turns": [
            ("left", 0.85, 0.92, "smooth", "2024-02-20T10:00:00Z", "2024-02-20T10:00:01.2Z"),
            ("right", 0.88, 0.95, "abrupt", "2024-02-20T10:00:01.5Z", "2024-02-20T10:00:02.7Z"),
            ("left", 0.82, 0.90, "smooth", "2024-02-20T10:00:03.0Z", "2024-02-20T10:00:04.1Z"),
        ],
    },
    {
        "start_time": "2024-02-20T11:00:00Z",
        "end_time": "2024-02-20T11:02:00Z",
        "path": "M 0 50 C 25 75, 75 25, 100 50",
        "turns": [
            ("right", 0.87, 0.93, "smooth", "2024-02-20T11:00:00Z", "2024-02-20T11:00:01.1Z"),
            ("left", 0.89, 0.96, "smooth", "2024-02-20T11:00:01.4Z", "2024-02-20T11:00:02.3Z"),
            ("right", 0.91, 0.94, "smooth", "2024-02-20T11:00:02.6Z", "2024-02-20T11:00:03.8Z"),
            ("left", 0.88, 0.92, "abrupt", "2024-02-20T11:00:04.0Z", "2024-02-20T11:00:05.2Z"),
            ("right", 0.86, 0.91, "smooth", "2024-02-20T11:00:05.5Z", "2024-02-20T11:00:06.7Z"),
            ("left", 0.90, 0.95, "smooth", "2024-02-20T11:00:07.0Z", "2024-02-20T11:00:08.1Z"),
        ],
    },
]

# Navigation links included in every envelope: name -> (href, method)
API_LINKS = {
    "runs": ("/api/runs", "GET"),
    "root": ("/", "GET"),
    "create_run": ("/api/runs", "POST"),
    "create_turn": ("/api/turns", "POST"),
}
