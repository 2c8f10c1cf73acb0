EXIT_OK = 0  # Coverage at or above the minimum
EXIT_FAILURE = 1  # Coverage below the minimum, or any unrecoverable error
