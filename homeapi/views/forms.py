# homeapi/views/forms.py
"""
Formulários de validação dos corpos JSON.

Os campos do WTForms foram pensados para formulários HTML, onde tudo chega
como string. Aqui os valores vêm do JSON já tipados, então os campos abaixo
aceitam o tipo JSON certo (e a string equivalente) e recusam o resto, por
exemplo ``true`` num campo numérico.
"""
import math
import re
from datetime import datetime, timezone

from flask_wtf import FlaskForm
from werkzeug.datastructures import ImmutableMultiDict
from wtforms import Field
from wtforms.validators import DataRequired, StopValidation

# mesma mensagem do cliente antigo para qualquer valor mal formado
INVALID_VALUE = "Invalid value"

# faixa do INTEGER do SQLite (64 bits com sinal)
INTEGER_MIN = -2 ** 63
INTEGER_MAX = 2 ** 63 - 1


class Present:
    """Exige que a chave exista no corpo. Aceita valores falsos como false e 0."""

    def __init__(self, message=None):
        self.message = message or "This field is required."

    def __call__(self, form, field):
        if not field.raw_data:
            raise StopValidation(self.message)


class JSONStringField(Field):

    def process_formdata(self, valuelist):
        if not valuelist:
            return
        value = valuelist[0]
        self.data = None
        if not isinstance(value, str):
            raise ValueError(INVALID_VALUE)
        self.data = value


class JSONFloatField(Field):

    def process_formdata(self, valuelist):
        if not valuelist:
            return
        value = valuelist[0]
        self.data = None
        if isinstance(value, bool):
            raise ValueError(INVALID_VALUE)
        try:
            data = float(value)
        except (TypeError, ValueError):
            raise ValueError(INVALID_VALUE)
        if not math.isfinite(data):
            raise ValueError(INVALID_VALUE)
        self.data = data


class JSONIntegerField(Field):

    def __init__(self, label=None, validators=None, optional=False, **kwargs):
        super().__init__(label, validators, **kwargs)
        self.optional = optional

    def process_formdata(self, valuelist):
        if not valuelist:
            return
        value = valuelist[0]
        self.data = None
        if value is None and self.optional:
            return
        if isinstance(value, bool):
            raise ValueError(INVALID_VALUE)
        if isinstance(value, float):
            if not value.is_integer():
                raise ValueError(INVALID_VALUE)
            data = int(value)
        else:
            try:
                data = int(value)
            except (TypeError, ValueError):
                raise ValueError(INVALID_VALUE)
        if not INTEGER_MIN <= data <= INTEGER_MAX:
            raise ValueError(INVALID_VALUE)
        self.data = data


class JSONBooleanField(Field):
    true_values = (True, 1, "true", "1")
    false_values = (False, 0, "false", "0")

    def process_formdata(self, valuelist):
        if not valuelist:
            return
        value = valuelist[0]
        self.data = None
        # 1 == True em Python, mas 1.0 não deve passar
        if isinstance(value, float):
            raise ValueError(INVALID_VALUE)
        if value in self.true_values:
            self.data = True
        elif value in self.false_values:
            self.data = False
        else:
            raise ValueError(INVALID_VALUE)


class ISODateTimeField(Field):
    """Data ISO-8601 opcional. Com fuso é convertida para UTC; sem fuso é tomada como UTC."""

    def process_formdata(self, valuelist):
        if not valuelist or valuelist[0] in (None, ""):
            self.data = None
            return
        value = valuelist[0]
        if not isinstance(value, str):
            raise ValueError(INVALID_VALUE)
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            raise ValueError(INVALID_VALUE)
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
        self.data = parsed


class JSONForm(FlaskForm):
    """Base dos formulários da API: sem CSRF, alimentado pelo corpo JSON."""

    class Meta:
        csrf = False

    @classmethod
    def from_json(cls, payload):
        # corpo que não é objeto (lista, número, ausente) conta como vazio
        if not isinstance(payload, dict):
            payload = {}
        # pares explícitos: uma lista no JSON continua sendo um único valor
        return cls(formdata=ImmutableMultiDict(list(payload.items())))

    def error_messages(self):
        messages = []
        for name, errors in self.errors.items():
            for error in errors:
                messages.append(f"body[{name}]: {error}")
        return messages


class LoginForm(JSONForm):
    username = JSONStringField('username', validators=[DataRequired()])
    password = JSONStringField('password', validators=[DataRequired()])


class TemperatureForm(JSONForm):
    value = JSONFloatField('value', validators=[Present()])
    date = ISODateTimeField('date')


class SwitchForm(JSONForm):
    value = JSONBooleanField('value', validators=[Present()])
    date = ISODateTimeField('date')


class LightForm(JSONForm):
    value = JSONIntegerField('value', validators=[Present()])
    date = ISODateTimeField('date')


class UpdateFormMixin:
    id = JSONIntegerField('id', validators=[Present()])
    # aceito por compatibilidade com os clientes, o dono vem da sessão
    user = JSONIntegerField('user', optional=True)


class TemperatureUpdateForm(UpdateFormMixin, TemperatureForm):
    pass


class SwitchUpdateForm(UpdateFormMixin, SwitchForm):
    pass


class LightUpdateForm(UpdateFormMixin, LightForm):
    pass


CREATE_FORMS = {
    "temperatures": TemperatureForm,
    "switches": SwitchForm,
    "lights": LightForm,
}

UPDATE_FORMS = {
    "temperatures": TemperatureUpdateForm,
    "switches": SwitchUpdateForm,
    "lights": LightUpdateForm,
}


def parse_path_id(raw_id):
    """Converte o id da URL; None quando não é só dígitos ou não cabe no banco."""
    if not isinstance(raw_id, str) or not re.fullmatch(r"[0-9]+", raw_id):
        return None
    # mais de 19 dígitos nunca cabe em 64 bits
    if len(raw_id.lstrip("0")) > 19:
        return None
    item_id = int(raw_id)
    if item_id > INTEGER_MAX:
        return None
    return item_id
