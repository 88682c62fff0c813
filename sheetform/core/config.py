"""
Configuration file untuk Sheet Form Builder
Semua setting global ada di sini
"""

import os

# ===== FORM CONFIGURATION =====
FORM_CONFIG = {
    'title_template': "Formulário criado de: {sheet_name} ({timestamp})",
    'description_template': "Este formulário foi gerado automaticamente da Planilha Google '{sheet_name}'.",
    'completion_notice': "Formulário criado! Você pode editá-lo aqui: {edit_url}",
    'validation_message': "Erro: A planilha deve conter pelo menos 2 linhas: uma para títulos e uma para tipos de pergunta.",
    'scale_bounds': (1, 5),  # escala linear sempre 1-5
}

# ===== MENU (trigger surface) =====
MENU_TITLE = '✨ Ferramentas de Formulário'
MENU_ITEM = 'Criar Formulário desta Planilha'

# ===== GOOGLE FORMS API SETTINGS =====
GOOGLE_API_CONFIG = {
    'base_url': 'https://forms.googleapis.com/v1/forms',
    'edit_url_template': 'https://docs.google.com/forms/d/{form_id}/edit',
    'token': os.getenv('GOOGLE_FORMS_TOKEN', ''),
}

# ===== HTTP REQUEST SETTINGS =====
REQUEST_CONFIG = {
    'headers': {
        'Content-Type': 'application/json'
    },
    'timeout': 30,  # seconds
}

# ===== AUTOMATION SETTINGS =====
AUTOMATION_CONFIG = {
    'verbose': True,          # False -> hanya WARNING ke atas (--verbose -> DEBUG)
    'dry_run': False,        # Set True untuk build in-memory tanpa Google API

    # ===== TIMEZONE SETTINGS =====
    'timezone': 'America/Sao_Paulo',
    'timestamp_format': '%d/%m/%Y %H:%M:%S',  # Format timestamp di judul form
}

# ===== SHEET FORMAT CONFIGURATION =====
SHEET_CONFIG = {
    'header_row': 0,
    'type_row': 1,
    'options_start_row': 2,
    'supported_extensions': ['.csv', '.xlsx', '.xls'],
    'csv_encodings': ['utf-8-sig', 'cp1252', 'latin-1'],  # dicoba berurutan
}
