"""Run the app from a source checkout: python main.py"""

from dadjokes.app import main

if __name__ == "__main__":
    main()
