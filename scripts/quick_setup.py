#!/usr/bin/env python
"""
Setup rápido para desenvolvimento local.

Este script:
1. Configura Django settings
2. Cria banco de dados SQLite
3. Executa migrations
4. Cadastra uma assinatura de exemplo (opcional)

Uso:
    python scripts/quick_setup.py
    python scripts/quick_setup.py --with-sample-data
"""

import os
import sys
import argparse
from datetime import datetime, timedelta
from decimal import Decimal

# Raiz do projeto no path (execução direta do script)
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def setup_django():
    """Configura Django para uso standalone."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'src.config.settings')

    # Forçar SQLite para desenvolvimento rápido
    os.environ['DATABASE_URL'] = 'sqlite:///db.sqlite3'
    # Sem SMTP local
    os.environ.setdefault('EMAIL_SERVICE_MODE', 'logging')

    import django
    django.setup()


def run_migrations():
    """Executa migrations."""
    from django.core.management import call_command

    print("📦 Executando migrations...")
    call_command('migrate', verbosity=1)
    print("✅ Migrations concluídas!")


def create_sample_data():
    """Cadastra um aluno com assinatura paga via boleto."""
    from src.config.container import get_container
    from src.core.assinaturas.dtos import CreateBoletoSubscriptionCommand

    now = datetime.now()
    command = CreateBoletoSubscriptionCommand(
        first_name='Bruce',
        last_name='Wayne',
        document='53020223385',
        email='batman@dc.com',
        bar_code='23790504004188802001',
        boleto_number='1234554321',
        paid_date=now,
        expire_date=now + timedelta(days=5),
        total=Decimal('60'),
        total_paid=Decimal('60'),
        payer='Wayne Corp',
        payer_document='12345678911',
        payer_email='batman@dc.com',
        street='Mountain Drive',
        number='1007',
        neighborhood='Bristol',
        city='Gotham',
        state='NJ',
        country='US',
        zip_code='07001',
    )

    print("📝 Cadastrando assinatura de exemplo...")

    result = get_container().subscription_handler().handle(command)

    if result.success:
        print(f"✅ {result.message}")
    else:
        print(f"⚠️  {result.message}")
        for notification in result.notifications:
            print(f"   - {notification.key}: {notification.message}")


def check_connection():
    """Verifica conexão com o banco."""
    from django.db import connection

    print("🔍 Verificando conexão com o banco...")

    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
        print("✅ Conexão OK!")
        return True
    except Exception as e:
        print(f"❌ Erro de conexão: {e}")
        return False


def show_info():
    """Mostra informações do setup."""
    from django.conf import settings

    print("\n" + "=" * 60)
    print("📊 Informações do Setup")
    print("=" * 60)
    print(f"  Database Engine: {settings.DATABASES['default']['ENGINE']}")
    print(f"  Database Name: {settings.DATABASES['default']['NAME']}")
    print(f"  E-mail Mode: {settings.EMAIL_SERVICE_MODE}")
    print(f"  Debug Mode: {settings.DEBUG}")
    print("=" * 60)
    print("\n🚀 Próximos passos:")
    print("   1. django-admin runserver --settings=src.config.settings")
    print("   2. POST http://localhost:8000/assinaturas/api/boleto/")
    print("\n")


def main():
    parser = argparse.ArgumentParser(description='Setup rápido para desenvolvimento')
    parser.add_argument(
        '--with-sample-data',
        action='store_true',
        help='Cadastrar assinatura de exemplo'
    )
    parser.add_argument(
        '--check-only',
        action='store_true',
        help='Apenas verificar conexão'
    )

    args = parser.parse_args()

    print("\n" + "=" * 60)
    print("🔧 Assinaturas - Quick Setup")
    print("=" * 60 + "\n")

    setup_django()

    if args.check_only:
        check_connection()
        return

    if not check_connection():
        print("\n⚠️  Certifique-se de que o banco de dados está rodando.")
        return

    run_migrations()

    if args.with_sample_data:
        create_sample_data()

    show_info()


if __name__ == '__main__':
    main()
