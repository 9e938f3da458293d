#!/usr/bin/env python3
"""Basic usage example"""

from logfile_module import LogFileBuilder, LogLevel


def load_settings():
    try:
        open("missing-settings.ini").close()
    except OSError as e:
        raise RuntimeError("Unable to load settings") from e


def main():
    # Create log file with builder pattern
    log = (LogFileBuilder()
        .with_file("logs/example.log", create_dirs=True)
        .with_level(LogLevel.ALL)
        .with_inner_exceptions()
        .with_console()
        .build())

    # Start from a fresh file
    log.delete()

    log.info("Application started")
    log.warning("Disk space low", 512, "MB left")
    log.info_format("Formatted entry : {0}:{1}:{2}", 123, 456, 789)

    try:
        load_settings()
    except RuntimeError as e:
        log.error("Startup failed", e)

    log.divider()
    log.critical("Shutting down")


if __name__ == "__main__":
    main()
