from django import forms


class LoginForm(forms.Form):
    username = forms.CharField()
    password = forms.CharField(strip=False)


class AdminLoginForm(forms.Form):
    password = forms.CharField(strip=False)
