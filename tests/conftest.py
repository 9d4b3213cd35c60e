# SPDX-License-Identifier: MIT

import pytest

from bujo.interaction.app import App
from bujo.model.journal import Journal
from bujo.template.configuration import get_configuration_template
from helpers import TODAY, FakeStorage


@pytest.fixture
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture
def journal() -> Journal:
    return Journal()


@pytest.fixture
def app(journal: Journal, storage: FakeStorage) -> App:
    return App(journal, storage, today=lambda: TODAY)  # type: ignore[arg-type]


@pytest.fixture
def config():
    return get_configuration_template()
