"""
Erros do Sistema Quizboard
==========================

Taxonomia de erros da API. Cada erro sabe seu status HTTP e se
serializa como {"error": mensagem, "kind": tipo, ...detalhes}:
- ValidationError (400): entrada ausente ou malformada
- NotFoundError (404): entidade referenciada não existe
- ConflictError (409): resposta, tag ou usuário duplicado
- StoreError (500): falha do banco, nada foi gravado
"""


class QuizboardError(Exception):
    """Erro base do Quizboard"""

    status_code = 500
    kind = 'error'

    def __init__(self, message, **details):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self):
        payload = {'error': self.message, 'kind': self.kind}
        payload.update(self.details)
        return payload


class ValidationError(QuizboardError):
    status_code = 400
    kind = 'validation'


class InvalidOptionError(ValidationError):
    def __init__(self, option):
        super().__init__('A opção deve ser um inteiro entre 1 e 4.', option=option)


class NotFoundError(QuizboardError):
    status_code = 404
    kind = 'not_found'


class UserNotFoundError(NotFoundError):
    def __init__(self, user_id):
        super().__init__(f'Usuário com ID {user_id} não encontrado.', user_id=user_id)


class QuestionNotFoundError(NotFoundError):
    def __init__(self, question_id):
        super().__init__(f'Questão com ID {question_id} não encontrada.', question_id=question_id)


class TagNotFoundError(NotFoundError):
    def __init__(self, tag):
        super().__init__(f'Tag "{tag}" não encontrada.', tag=tag)


class ConflictError(QuizboardError):
    status_code = 409
    kind = 'conflict'


class AlreadyAnsweredError(ConflictError):
    def __init__(self, user_id, question_id):
        super().__init__('Esta questão já foi respondida pelo usuário.',
                         user_id=user_id, question_id=question_id)


class StoreError(QuizboardError):
    status_code = 500
    kind = 'store'
