"""
atwgen - three-panel comic generator

Super simple launcher script for the application.
"""
import sys
import os

# Add src directory to path
sys.path.append(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

# Import main function
from atwgen.main import main

if __name__ == "__main__":
    # Run with proper argument parsing
    main()
