"""Shared pytest fixtures and configuration for all tests."""

import textwrap

import pytest

from quickreact.lang import parse_markup


@pytest.fixture
def minimal_markup():
    """Smallest valid document: App with one self-closing child."""
    return "<App><Header/></App>"


@pytest.fixture
def sample_markup():
    """A document exercising config flags, hooks, forms and nesting."""
    return textwrap.dedent(
        """\
        <Config bootstrap router />
        <App useState*3 useContext useReducer switch route link>
            <Header />
            <Main useEffect[loadPosts,loadUsers]>
                <Signup form fetch=post forminputs=text[first_name,last_name],password,checkbox*2 />
            </Main>
            <Footer link />
        </App>
        """
    )


@pytest.fixture
def sample_tree(sample_markup):
    return parse_markup(sample_markup)


@pytest.fixture
def markup_file(tmp_path, sample_markup):
    """The sample markup written to ``site.qr`` in a temporary directory."""
    path = tmp_path / "site.qr"
    path.write_text(sample_markup, encoding="utf-8")
    return path
