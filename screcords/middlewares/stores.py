from functools import wraps
from flask import request, g
from werkzeug.exceptions import BadRequest, NotFound


def validate_route_param(param_name=None, transform_func=None):

    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            chosen_option = request.view_args.get(param_name)

            if not chosen_option:
                raise BadRequest(f"Missing required parameter: {param_name}")

            available_options = transform_func()

            if chosen_option not in available_options:
                valid_options = ', '.join(available_options)
                raise NotFound(
                    f"Unknown {param_name}: '{chosen_option}'. "
                    f"Valid options are: {valid_options}"
                )

            setattr(g, f"{param_name}_name", chosen_option)
            kwargs[param_name] = chosen_option

            return f(*args, **kwargs)

        return wrapper

    return decorator
