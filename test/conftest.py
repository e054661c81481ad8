"""
Pytest configuration and fixtures for testing.
Uses an in-memory SQLite database instead of MySQL.
"""
import os

import pytest

# Set test environment variables BEFORE importing the app package
os.environ['FLASK_ENV'] = 'testing'
os.environ['SECRET_KEY'] = 'sfndsfojoriwew09rjfjndsknfkj'
os.environ['DATABASE_URL'] = 'sqlite:///:memory:'
os.environ['LOG_LEVEL'] = 'DEBUG'

from academia import create_app, db


RICH_TEXT = (
    "A neural network is a type of machine learning model built from layers of connected neurons. "
    "Each neuron in a neural network applies an activation function to a weighted sum of its inputs. "
    "The activation function introduces non-linearity so that the network can learn complex patterns. "
    "Backpropagation refers to the algorithm that computes gradients of the loss function for every weight. "
    "Gradient descent uses those gradients to update each weight in small steps scaled by the learning rate. "
    "The learning rate controls how quickly gradient descent moves toward a minimum of the loss function. "
    "Overfitting is known as the situation where a model memorizes training data instead of generalizing. "
    "Regularization techniques such as dropout reduce overfitting by randomly disabling neurons during training. "
    "A convolutional layer is defined as a layer that slides small filters across an input image. "
    "Pooling layers shrink feature maps while keeping the strongest activation in each region. "
    "Recurrent networks process sequences by passing a hidden state from one time step to the next. "
    "Training data is split into a training set, a validation set and a test set before fitting. "
    "The validation set means the portion of training data used to tune the learning rate and other settings. "
    "Batch normalization rescales layer outputs so that training with gradient descent remains stable. "
    "Transfer learning reuses a neural network trained on one task as the starting point for another task. "
    "An embedding layer maps discrete tokens to dense vectors that the neural network can process. "
)


class SequenceRandom:
    """Random source that replays fixed values and leaves shuffled lists untouched."""

    def __init__(self, values):
        self.values = list(values)

    def random(self):
        return self.values.pop(0)

    def shuffle(self, items):
        pass


@pytest.fixture(scope='function')
def app(tmp_path, monkeypatch):
    """Create application for testing with a fresh database and upload directory."""
    upload_dir = tmp_path / "uploads"
    upload_dir.mkdir()
    monkeypatch.setenv('UPLOAD_DIR', str(upload_dir))

    app = create_app()
    app.config['TESTING'] = True
    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture(scope='function')
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture(scope='function')
def app_context(app):
    """Push an application context for code that logs through current_app."""
    with app.app_context():
        yield app


@pytest.fixture
def upload_dir(app):
    return app.config['UPLOAD_DIR']


@pytest.fixture
def rich_text():
    return RICH_TEXT


@pytest.fixture
def sequence_random():
    """Factory for deterministic random sources."""
    return SequenceRandom
