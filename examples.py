#!/usr/bin/env python3
"""
Examples of using flowbox.

Run this file to print example flow diagrams to the terminal. Pass --save to
also write each text-defined example to a PNG file.
"""

import sys

from flowbox import FlowGenerator, compose, compose_branched, render_legend


def example_legend():
    """Status legend"""
    print("Example 1: Status Legend")
    render_legend()


def example_build_pipeline():
    """Simple horizontal build pipeline"""
    print("Example 2: Build Pipeline")

    compose(
        [
            {"content": "Code", "status": "success"},
            {"content": "Test", "status": "success"},
            {"content": "Build", "status": "active"},
            {"content": "Deploy", "status": "pending"},
        ]
    )
    print()


def example_data_pipeline():
    """Vertical data pipeline"""
    print("Example 3: Data Pipeline")

    compose(
        [
            {"content": "Raw Data", "status": "success"},
            {"content": "Clean & Validate", "status": "success"},
            {"content": "Transform", "status": "warning"},
            {"content": "Load to DB", "status": "ready"},
            {"content": "Index & Search", "status": "pending"},
        ],
        direction="vertical",
    )
    print()


def example_no_arrows():
    """Custom spacing with arrows turned off"""
    print("Example 4: No Arrows")

    compose(
        [
            {"content": "Step A", "status": "success"},
            {"content": "Step B", "status": "error"},
            {"content": "Step C", "status": "warning"},
        ],
        spacing=4,
        show_arrows=False,
    )
    print()


def example_all_statuses():
    """Every status side by side"""
    print("Example 5: Status States")

    compose(
        [
            {"content": "Pending Task", "status": "pending"},
            {"content": "Ready Task", "status": "ready"},
            {"content": "Active Task", "status": "active"},
            {"content": "Success Task", "status": "success"},
            {"content": "Warning Task", "status": "warning"},
            {"content": "Error Task", "status": "error"},
        ],
        spacing=1,
    )
    print()


def example_branched():
    """Branched request processing"""
    print("Example 6: Request Processing")

    compose_branched(
        [
            {"content": "HTTP Request", "status": "success"},
            {"content": "Auth & Validation", "status": "success"},
            {"content": "Route Decision", "status": "active"},
        ],
        [
            [
                {"content": "API Endpoint", "status": "ready"},
                {"content": "JSON Response", "status": "pending"},
            ],
            [
                {"content": "Web Page", "status": "ready"},
                {"content": "HTML Render", "status": "pending"},
            ],
        ],
    )
    print()


def example_from_text(save=False):
    """CI/CD pipeline from flow text"""
    print("Example 7: CI/CD Pipeline from Text")

    input_text = """
    Git Push [success] -> Webhook Trigger [success] -> Build Container [success]
    Build Container -> Run Tests [active] -> Security Scan -> Deploy Staging
    Deploy Staging -> Deploy Prod
    """

    generator = FlowGenerator()
    generator.generate(input_text)
    if save:
        generator.save_png(input_text, "example_cicd.png", scale=2)
        print("  Saved: example_cicd.png")
    print()


def example_microservices(save=False):
    """Microservice call chain with a failing database"""
    print("Example 8: Microservice Architecture")

    input_text = """
    API Gateway [success] -> Auth Service [success] -> User Service [warning]
    User Service -> Database [error]
    User Service -> Cache [success]
    """

    generator = FlowGenerator(direction="vertical")
    generator.generate(input_text)
    if save:
        generator.save_png(input_text, "example_microservice.png", scale=2)
        print("  Saved: example_microservice.png")
    print()


if __name__ == "__main__":
    save = "--save" in sys.argv[1:]

    print("=" * 60)
    print("flowbox Examples")
    print("=" * 60 + "\n")

    example_legend()
    example_build_pipeline()
    example_data_pipeline()
    example_no_arrows()
    example_all_statuses()
    example_branched()
    example_from_text(save)
    example_microservices(save)
