"""
Training launcher.

Usage:
    # MNIST defaults (mnist/train, mnist/valid, model folder MnistTrainer)
    python train.py

    # Custom folders and schedule
    python train.py -t data/train -v data/valid -e 10 -b 128 --scheduler cosine

    # YAML recipe (authoritative over every other option)
    python train.py --config recipes/config_mnist.yaml
"""

from digitforge.pipeline.training import main

if __name__ == "__main__":
    main()
