"""Views for the core application."""

from django.shortcuts import render, redirect
from django.contrib.auth.forms import UserCreationForm
from django.contrib import messages
from django.urls import reverse


def index(request):
    """
    Renders the home/index page.
    If the user is authenticated, redirect to the learn page.
    """
    if request.user.is_authenticated:
        return redirect(reverse('learn:learn'))
    return render(request, 'core/index.html')


def register(request):
    """
    Handles user registration.
    Uses Django's built-in UserCreationForm.
    """
    if request.method == 'POST':
        form = UserCreationForm(request.POST)
        if form.is_valid():
            form.save()
            username = form.cleaned_data.get('username')
            messages.success(request, f'Account created for {username}! You can now log in.')
            return redirect(reverse('login'))
        messages.error(request, 'Please correct the errors below.')
    else:
        form = UserCreationForm()

    return render(request, 'registration/register.html', {'form': form})
