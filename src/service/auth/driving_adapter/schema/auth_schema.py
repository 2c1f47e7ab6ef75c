from pydantic import BaseModel, field_validator


class LoginForm(BaseModel):
    email: str
    password: str

    @field_validator('email')
    @classmethod
    def validate_email(cls, v: str) -> str:
        v = v.strip()
        if '@' not in v:
            raise ValueError('Enter a valid email address')
        return v

    @field_validator('password')
    @classmethod
    def validate_password(cls, v: str) -> str:
        if not v:
            raise ValueError('Password is required')
        return v

    class Config:
        json_schema_extra = {'example': {'email': 'user@bus.com', 'password': 'P@ssw0rd'}}


class RegisterForm(LoginForm):
    name: str

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError('Name is required')
        return v

    class Config:
        json_schema_extra = {
            'example': {'name': 'Usuario', 'email': 'user@bus.com', 'password': 'P@ssw0rd'}
        }
