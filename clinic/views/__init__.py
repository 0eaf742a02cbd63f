from rest_framework.exceptions import NotFound


def get_or_404(model, pk, message):
    obj = model.objects.filter(pk=pk).first()
    if obj is None:
        raise NotFound(message)
    return obj
