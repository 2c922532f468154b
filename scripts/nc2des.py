#!/usr/bin/env python
from ncdescr.cli import run


if __name__ == "__main__":
    run()
