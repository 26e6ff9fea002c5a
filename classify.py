"""
Classification launcher.

Usage:
    python classify.py mnist/test
    python classify.py -m MnistTrainer digit_a.png digit_b.png
"""

from digitforge.pipeline.classification import main

if __name__ == "__main__":
    main()
