"""Shared test fixtures for go-complexity tests."""

import textwrap

import pytest

from go_complexity.analyzer import parse


def go(code: str) -> str:
    """Dedent an inline Go snippet."""
    return textwrap.dedent(code).lstrip("\n")


def wrap_function(body: str, signature: str = "func f()") -> str:
    """Wrap statements in a one-function Go file."""
    return f"package main\n\n{signature} {{\n{textwrap.dedent(body)}}}\n"


@pytest.fixture
def simple_source():
    """One branch-free function with a single return."""
    return go(
        """
        package main

        func add(a, b int) int {
        	return a + b
        }
        """
    )


@pytest.fixture
def nested_source():
    """Two nested ifs inside one function."""
    return go(
        """
        package main

        func check(a, b bool) int {
        	if a {
        		if b {
        			return 1
        		}
        	}
        	return 0
        }
        """
    )


@pytest.fixture
def documented_source():
    """A function with a two-line doc comment and one inner comment."""
    return go(
        """
        package main

        // Greet returns a greeting.
        // It never fails.
        func Greet(name string) string {
        	// build the message
        	return "hello " + name
        }
        """
    )


@pytest.fixture
def multi_function_source():
    """A function, a method and a closure-bearing function, in that order."""
    return go(
        """
        package server

        import "net/http"

        type Server struct{}

        func New() *Server {
        	return &Server{}
        }

        func (s *Server) Handle(w http.ResponseWriter, r *http.Request) {
        	if r == nil {
        		return
        	}
        	w.WriteHeader(200)
        }

        func run(items []int) int {
        	total := 0
        	add := func(n int) int {
        		return total + n
        	}
        	for _, item := range items {
        		total = add(item)
        	}
        	return total
        }
        """
    )


@pytest.fixture
def no_function_source():
    """Valid Go with declarations but no functions."""
    return go(
        """
        package config

        const Version = "1.0"

        var Debug = false
        """
    )


@pytest.fixture
def go_file(tmp_path, multi_function_source):
    """A .go file on disk holding ``multi_function_source``."""
    path = tmp_path / "server.go"
    path.write_text(multi_function_source, encoding="utf-8")
    return path


@pytest.fixture
def single_function():
    """Parse statements wrapped in ``func f()`` and return the FunctionUnit."""

    def _single_function(body: str, signature: str = "func f()"):
        unit = parse("main.go", wrap_function(body, signature))
        (function,) = unit.functions()
        return function

    return _single_function
