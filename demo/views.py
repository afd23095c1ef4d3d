from django.http import HttpResponse, StreamingHttpResponse
from django.shortcuts import render
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from django_multidomain.conf import settings


def page_view(request, slug=""):
    """
    A simple page linking to every configured domain.
    """
    return render(
        request,
        "demo/page.html",
        {
            "slug": slug,
            "image_url": f"{settings.HOME_URL.rstrip('/')}/media/logo.png",
            "body": f'<a href="{settings.HOME_URL}">home</a>',
        },
    )


def health_view(request):
    return HttpResponse("OK", content_type="text/plain")


def stream_view(request):
    """
    Streaming responses are sent as they are.
    """
    return StreamingHttpResponse(
        iter([f'<a href="{settings.HOME_URL}">home</a>']),
        content_type="text/html",
    )


@api_view(["GET"])
def domain_view(request):
    """
    A simple API view describing the domain serving the request.
    """
    context = request.multidomain
    return Response(
        {
            "domain": context.current_domain,
            "original_domain": context.original_domain,
            "lang": context.get_domain_lang(),
            "home_url": context.apply_filter("option_home", settings.HOME_URL),
            "upload_dir": context.apply_filter(
                "upload_dir",
                {
                    "url": f"{settings.HOME_URL.rstrip('/')}/media/2024/01",
                    "baseurl": f"{settings.HOME_URL.rstrip('/')}/media",
                },
            ),
        },
        status=status.HTTP_200_OK,
    )


def raw_view(request):
    """
    An HTML response built without templates.
    """
    return HttpResponse(
        f'<a href="{settings.HOME_URL.rstrip("/")}/contact/">contact</a>',
        content_type="text/html; charset=utf-8",
    )
