"""Shared feed fixtures."""

import pytest

from .feeds import make_feed, make_item


@pytest.fixture
def sample_feed():
    return make_feed(
        make_item(
            title="Older post",
            link="https://medium.com/@chemicalstan15/older",
            pub_date="Fri, 05 Jan 2024 10:00:00 GMT",
            description="<p>Older body</p>",
        ),
        make_item(
            title="Newer post",
            link="https://medium.com/@chemicalstan15/newer",
            pub_date="Mon, 12 Feb 2024 08:30:00 GMT",
            description="<p>Newer body</p>",
        ),
    )
