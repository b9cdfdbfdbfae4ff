"""
Funções Auxiliares - Quizboard
==============================

Funções utilitárias para:
- Validação de dados de usuários e questões
- Conversão de parâmetros (alternativa, ordenação, IDs)
"""

import re

from models.question import OPTION_NUMBERS, QuestionLevel
from utils.errors import InvalidOptionError, ValidationError

SORT_DIRECTIONS = ('asc', 'desc')
QUESTION_TEXT_FIELDS = ('name', 'question', 'option1', 'option2', 'option3', 'option4')


def validate_email(email):
    """
    Valida formato de email

    Args:
        email (str): Email para validar

    Returns:
        bool: True se válido, False caso contrário
    """
    if not email:
        return False

    pattern = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'
    return re.match(pattern, email) is not None


def validate_password(password):
    """
    Valida força da senha

    Args:
        password (str): Senha para validar

    Returns:
        tuple: (bool, str) - (é_válida, mensagem)
    """
    if not password:
        return False, "Senha é obrigatória"

    if len(password) < 6:
        return False, "Senha deve ter pelo menos 6 caracteres"

    if len(password) > 128:
        return False, "Senha muito longa"

    has_letter = any(c.isalpha() for c in password)
    has_number = any(c.isdigit() for c in password)

    if not has_letter:
        return False, "Senha deve conter pelo menos uma letra"

    if not has_number:
        return False, "Senha deve conter pelo menos um número"

    return True, "Senha válida"


def validate_user_data(data):
    """
    Valida dados de cadastro de usuário

    Args:
        data (dict): name, email e password

    Returns:
        tuple: (bool, list) - (é_válido, lista_de_erros)
    """
    errors = []

    name = _text(data.get('name'))
    if not name:
        errors.append("Nome é obrigatório")
    elif len(name) > 255:
        errors.append("Nome muito longo (máximo 255 caracteres)")

    email = _text(data.get('email'))
    if not email:
        errors.append("Email é obrigatório")
    elif not validate_email(email):
        errors.append("Formato de email inválido")

    password = data.get('password')
    is_valid, password_message = validate_password(password if isinstance(password, str) else None)
    if not is_valid:
        errors.append(password_message)

    return len(errors) == 0, errors


def validate_question_data(data):
    """
    Valida dados de criação de questão

    Args:
        data (dict): Dados da questão

    Returns:
        tuple: (bool, list) - (é_válido, lista_de_erros)
    """
    errors = []

    for field in QUESTION_TEXT_FIELDS:
        if not _text(data.get(field)):
            errors.append(f"Campo '{field}' é obrigatório")

    if len(_text(data.get('name'))) > 255:
        errors.append("Nome muito longo (máximo 255 caracteres)")

    correct_option = data.get('correct_option')
    if correct_option is None:
        errors.append("Campo 'correct_option' é obrigatório")
    elif not _is_option(correct_option):
        errors.append("A alternativa correta deve ser um inteiro entre 1 e 4")

    level = data.get('level')
    if not level:
        errors.append("Campo 'level' é obrigatório")
    elif level not in QuestionLevel.values():
        errors.append(f"Nível inválido (use: {', '.join(QuestionLevel.values())})")

    if not _text(data.get('tag_name')):
        errors.append("Campo 'tag_name' é obrigatório")

    related_ids = data.get('related_ids')
    if related_ids is not None:
        if not isinstance(related_ids, list) or not all(_is_id(value) for value in related_ids):
            errors.append("related_ids deve ser uma lista de IDs inteiros")

    return len(errors) == 0, errors


def parse_option(option):
    """
    Converte a alternativa escolhida

    Raises:
        InvalidOptionError: se não for um inteiro entre 1 e 4
    """
    if not _is_option(option):
        raise InvalidOptionError(option)
    return option


def parse_id(value, field):
    """Converte um ID obrigatório (inteiro positivo)"""
    if value is None or value == '':
        raise ValidationError(f"Campo '{field}' é obrigatório.", field=field)
    if isinstance(value, str) and value.isdigit():
        value = int(value)
    if not _is_id(value):
        raise ValidationError(f"Campo '{field}' deve ser um inteiro positivo.", field=field)
    return value


def parse_sort(sort, default='desc'):
    """Normaliza a direção de ordenação ('asc' ou 'desc')"""
    if sort is None or sort == '':
        return default

    direction = str(sort).strip().lower()
    if direction not in SORT_DIRECTIONS:
        raise ValidationError("Ordenação deve ser 'asc' ou 'desc'.", sort=sort)
    return direction


def _text(value):
    return value.strip() if isinstance(value, str) else ''


def _is_option(value):
    # bool é subclasse de int: True não é alternativa
    return isinstance(value, int) and not isinstance(value, bool) and value in OPTION_NUMBERS


def _is_id(value):
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
