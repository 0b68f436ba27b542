"""
Configurações globais do Pytest para o serviço de Assinaturas.

Este arquivo é carregado automaticamente pelo pytest e
fornece fixtures e configurações compartilhadas.
"""

from datetime import datetime, timedelta
from decimal import Decimal
from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def project_root():
    """Retorna o caminho raiz do projeto."""
    return Path(__file__).parent.parent


@pytest.fixture
def student_data():
    """Campos comuns a todos os comandos de assinatura."""
    now = datetime(2024, 1, 31, 10, 0, 0)
    return {
        "first_name": "Bruce",
        "last_name": "Wayne",
        "document": "53020223385",
        "email": "batman@dc.com",
        "paid_date": now,
        "expire_date": now + timedelta(days=5),
        "total": Decimal("60"),
        "total_paid": Decimal("60"),
        "payer": "Wayne Corp",
        "payer_document": "12345678911",
        "payer_email": "batman@dc.com",
        "street": "Mountain Drive",
        "number": "1007",
        "neighborhood": "Bristol",
        "city": "Gotham",
        "state": "NJ",
        "country": "US",
        "zip_code": "07001",
    }


@pytest.fixture
def boleto_command(student_data):
    from src.core.assinaturas.dtos import CreateBoletoSubscriptionCommand

    return CreateBoletoSubscriptionCommand(
        bar_code="23790504004188802001",
        boleto_number="1234554321",
        **student_data,
    )


def pytest_addoption(parser):
    """Adiciona opções de linha de comando."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="run integration tests",
    )


def pytest_collection_modifyitems(config, items):
    """Pula testes de integração (banco) sem --run-integration."""
    if config.getoption("--run-integration", default=False):
        return

    skip_integration = pytest.mark.skip(reason="Integration tests require --run-integration")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)
